"""HTTP service mode for the codebase analyzer."""

from .app import create_app, run_service
from .auth import Identity, TokenVerificationError, TokenVerifier

__all__ = [
    "Identity",
    "TokenVerificationError",
    "TokenVerifier",
    "create_app",
    "run_service",
]
