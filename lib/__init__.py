# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Shared utilities (UTC clock, duration formatting)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import format_duration, utc_now

__all__ = [
    "format_duration",
    "utc_now",
]
