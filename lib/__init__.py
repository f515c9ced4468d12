# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - env.py: Read-only access to environment settings
# - errors.py: Error taxonomy and classified logging
# - supabase_client.py: Typed Supabase wrapper for database operations
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.errors import (
    AppError,
    ApplicationError,
    ConfigError,
    ErrorKind,
    create_app_error,
    log_error,
)
from lib.env import get_env_variable, read_setting, validate_env_variables

__all__ = [
    # Errors
    "AppError",
    "ApplicationError",
    "ConfigError",
    "ErrorKind",
    "create_app_error",
    "log_error",
    # Environment
    "get_env_variable",
    "read_setting",
    "validate_env_variables",
]
