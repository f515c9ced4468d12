# =============================================================================
# lib/env.py - Environment Settings Access
# =============================================================================
# Read-only helpers over a key/value settings store. In production the
# store is os.environ; tests pass a plain dict instead of mutating the
# real process environment.
#
# A value that is empty or whitespace-only counts as absent everywhere.
#
# Usage:
#   from lib.env import get_env_variable
#   secret = get_env_variable("NEXTAUTH_SECRET")            # raises if unset
#   url = get_env_variable("NEXTAUTH_URL", required=False)  # None if unset
# =============================================================================

from __future__ import annotations

import os
from typing import Mapping, Sequence

from lib.errors import AppError, ConfigError, ErrorKind, create_app_error, log_error

# Anything with exact-name lookup works: os.environ, dict, MappingProxyType
SettingsStore = Mapping[str, str]


def _store(env: SettingsStore | None) -> SettingsStore:
    return os.environ if env is None else env


def read_setting(name: str, env: SettingsStore | None = None) -> str | None:
    """Return the trimmed value of a setting, or None if it is unset or blank."""
    value = _store(env).get(name)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def is_setting_present(name: str, env: SettingsStore | None = None) -> bool:
    """Check whether a setting has a non-blank value."""
    return read_setting(name, env) is not None


def validate_env_variables(
    names: Sequence[str],
    env: SettingsStore | None = None,
) -> AppError | None:
    """
    Check that every named setting is present.

    Args:
        names: Setting names to check, in the order they should be reported
        env: Settings store (defaults to os.environ)

    Returns:
        None when all settings are present, otherwise a config AppError:
        - ENV_VALIDATION_EMPTY: no names were given
        - ENV_VALIDATION_INVALID: some names are empty or not strings
        - ENV_MISSING: some settings are absent
    """
    if not names:
        return create_app_error(
            "No environment variables provided for validation",
            ErrorKind.CONFIG,
            "ENV_VALIDATION_EMPTY",
        )

    invalid = [name for name in names if not isinstance(name, str) or not name]
    if invalid:
        return create_app_error(
            f"Invalid environment variable names: {', '.join(repr(n) for n in invalid)}",
            ErrorKind.CONFIG,
            "ENV_VALIDATION_INVALID",
        )

    missing = [name for name in names if not is_setting_present(name, env)]
    if missing:
        return create_app_error(
            f"Missing required environment variables: {', '.join(missing)}",
            ErrorKind.CONFIG,
            "ENV_MISSING",
        )

    return None


def get_env_variable(
    name: str,
    required: bool = True,
    env: SettingsStore | None = None,
) -> str | None:
    """
    Get a setting's trimmed value.

    Args:
        name: Setting name
        required: Raise when the setting is absent
        env: Settings store (defaults to os.environ)

    Returns:
        The trimmed value, or None if absent and not required

    Raises:
        ConfigError: If the setting is required but absent. The underlying
            AppError is logged before raising.
    """
    value = read_setting(name, env)
    if value is not None or not required:
        return value

    error = validate_env_variables([name], env)
    if error is None:
        # The value vanished between the two reads
        error = create_app_error(
            f"Unexpected error validating environment variable: {name}",
            ErrorKind.CONFIG,
            "ENV_VALIDATION_ERROR",
        )
    log_error(error)
    raise ConfigError(error)
