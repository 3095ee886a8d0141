# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the User API:
# - test_user_store.py: UserStore semantics and thread safety
# - test_mirror_service.py: Mirror file writing and failure handling
# - test_users_api.py: End-to-end tests for the user endpoints
# - test_health.py: Health, liveness, root and static endpoints
# - test_models.py: Pydantic model and envelope tests
# - test_config.py: Settings and logging configuration
# - test_utils.py: Shared utilities
#
# Run tests with: pytest
# =============================================================================
