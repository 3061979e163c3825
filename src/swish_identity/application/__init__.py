"""Identity application layer: registration, login and profile updates."""
