# =============================================================================
# app/auth/providers.py - Provider Configuration
# =============================================================================
# Decides which sign-in providers are usable from the settings store and
# builds the provider list handed to the auth library.
#
# A provider group is enabled when every one of its settings is present.
# A group with only some settings present is logged as a config warning;
# the app still starts without it.
#
# Usage:
#   from app.auth.providers import configure_oauth_providers
#   providers = configure_oauth_providers()
#   [p.id for p in providers]  # ["google", "github"]
# =============================================================================

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from lib.env import SettingsStore, is_setting_present, read_setting, validate_env_variables
from lib.errors import ErrorKind, create_app_error, log_error

logger = logging.getLogger(__name__)


class ProviderGroup(BaseModel):
    """A named feature and the settings it needs, in report order."""
    model_config = ConfigDict(frozen=True)

    name: str
    settings: tuple[str, ...]


class ProviderConfig(BaseModel):
    """Credentials for one enabled OAuth provider."""
    model_config = ConfigDict(frozen=True)

    id: str
    client_id: str
    client_secret: str


# -----------------------------------------------------------------------------
# Declarations
# -----------------------------------------------------------------------------

# Needed by the auth library itself, regardless of provider
BASE_AUTH_SETTINGS: tuple[str, ...] = ("NEXTAUTH_SECRET", "NEXTAUTH_URL")

# OAuth providers, in the order they are registered
OAUTH_PROVIDERS: tuple[str, ...] = ("google", "github", "facebook", "microsoft")


def _oauth_group(name: str) -> ProviderGroup:
    prefix = name.upper()
    return ProviderGroup(
        name=name,
        settings=(f"{prefix}_CLIENT_ID", f"{prefix}_CLIENT_SECRET"),
    )


PROVIDER_GROUPS: tuple[ProviderGroup, ...] = (
    *(_oauth_group(name) for name in OAUTH_PROVIDERS),
    ProviderGroup(
        name="supabase",
        settings=("NEXT_PUBLIC_SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
    ),
)


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------

def _check_base_settings(env: SettingsStore | None) -> None:
    error = validate_env_variables(BASE_AUTH_SETTINGS, env)
    if error:
        logger.warning(
            f"[AUTH CONFIG WARNING] NextAuth base configuration incomplete: {error.message}"
        )
        logger.warning("Authentication features may be limited.")


def _is_group_enabled(
    group: ProviderGroup,
    env: SettingsStore | None,
    allow_empty_groups: bool,
) -> bool:
    if not group.settings:
        return allow_empty_groups

    present = [name for name in group.settings if is_setting_present(name, env)]
    if len(present) == len(group.settings):
        return True

    if present:
        missing = [name for name in group.settings if name not in present]
        warning = create_app_error(
            f"Partial configuration for {group.name} provider. Missing: {', '.join(missing)}",
            ErrorKind.CONFIG,
            "ENV_PARTIAL",
        )
        log_error(warning, "Auth Config", level=logging.WARNING)

    return False


def validate_auth_config(
    env: SettingsStore | None = None,
    groups: Sequence[ProviderGroup] = PROVIDER_GROUPS,
    allow_empty_groups: bool = False,
) -> dict[str, bool]:
    """
    Work out which provider groups are fully configured.

    Never raises: missing base settings and partially configured groups
    are logged as warnings.

    Args:
        env: Settings store (defaults to os.environ)
        groups: Provider groups to check
        allow_empty_groups: Treat a group that declares no settings as
            enabled. Off by default.

    Returns:
        Mapping of group name to enabled flag, in group order
    """
    _check_base_settings(env)
    return {
        group.name: _is_group_enabled(group, env, allow_empty_groups)
        for group in groups
    }


def configure_oauth_providers(env: SettingsStore | None = None) -> list[ProviderConfig]:
    """
    Build the OAuth provider list for the auth library.

    Only enabled providers are returned, always in OAUTH_PROVIDERS order.
    """
    enabled = validate_auth_config(env)

    providers = []
    for name in OAUTH_PROVIDERS:
        if not enabled.get(name):
            continue
        prefix = name.upper()
        providers.append(
            ProviderConfig(
                id=name,
                client_id=read_setting(f"{prefix}_CLIENT_ID", env),
                client_secret=read_setting(f"{prefix}_CLIENT_SECRET", env),
            )
        )

    logger.debug(f"Configured OAuth providers: {[p.id for p in providers]}")
    return providers
