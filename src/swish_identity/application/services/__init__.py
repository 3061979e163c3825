"""Identity application services."""

from swish_identity.application.services.authentication_service import (
    AuthenticationService,
    PhotoUpload,
    RegistrationCandidate,
)

__all__ = ["AuthenticationService", "PhotoUpload", "RegistrationCandidate"]
