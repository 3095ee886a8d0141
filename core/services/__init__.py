# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_store import UserStore
from .mirror_service import UserMirror

__all__ = [
    "UserStore",
    "UserMirror",
]
