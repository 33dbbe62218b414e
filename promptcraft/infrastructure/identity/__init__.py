from promptcraft.infrastructure.identity.session_identity import (
    SessionIdentityProvider,
)

__all__ = ["SessionIdentityProvider"]
