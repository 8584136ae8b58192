"""URL routing: navigation, locale synchronisation and recovery links."""

from .navigation import HistoryNavigator, Location, NavigationRequest, Navigator
from .recovery import (
    DEFAULT_RECOVERY_PATH,
    RecoveryTokens,
    has_recovery_marker,
    is_recovery_path,
    recovery_redirect,
    recovery_tokens,
)
from .router import LocaleRouter, RouterState, locale_session

__all__ = [
    "DEFAULT_RECOVERY_PATH",
    "HistoryNavigator",
    "LocaleRouter",
    "Location",
    "NavigationRequest",
    "Navigator",
    "RecoveryTokens",
    "RouterState",
    "has_recovery_marker",
    "is_recovery_path",
    "locale_session",
    "recovery_redirect",
    "recovery_tokens",
]
