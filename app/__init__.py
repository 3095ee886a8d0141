# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, logging, middleware, error handlers, entry point
# - config.py: Environment variable loading and settings
# - exceptions.py: Error types and the handlers that render error envelopes
# - dependencies.py: Depends() providers for the store, mirror and settings
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
