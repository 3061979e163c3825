"""Application commands for identity management."""

from swish_identity.application.commands.update_profile_command import (
    UpdateProfileCommand,
)

__all__ = ["UpdateProfileCommand"]
