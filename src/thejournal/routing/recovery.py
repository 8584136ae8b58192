"""Password-recovery link detection.

Recovery emails land on an arbitrary page with ``type=recovery`` in the
query string or in the ``#access_token=...&type=recovery`` fragment. Such
visits are sent to the page that finishes the reset, keeping query and
fragment so the tokens survive the redirect.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs

from thejournal.i18n.languages import Language, path_for_language

from .navigation import Location, NavigationRequest

DEFAULT_RECOVERY_PATH = "/reset-password"


@dataclass(frozen=True, slots=True)
class RecoveryTokens:
    access_token: str
    refresh_token: str | None = None


def _params(raw: str) -> dict[str, list[str]]:
    return parse_qs(raw.lstrip("?#"), keep_blank_values=True)


def has_recovery_marker(location: Location) -> bool:
    for raw in (location.query, location.fragment):
        if "recovery" in _params(raw).get("type", []):
            return True
    return False


def is_recovery_path(path: str, recovery_path: str = DEFAULT_RECOVERY_PATH) -> bool:
    """True for the recovery page in either language."""
    return path_for_language(path, "en") == recovery_path


def recovery_redirect(
    location: Location,
    language: Language,
    recovery_path: str = DEFAULT_RECOVERY_PATH,
) -> NavigationRequest | None:
    if not has_recovery_marker(location) or is_recovery_path(location.path, recovery_path):
        return None
    return NavigationRequest(
        path=path_for_language(recovery_path, language),
        query=location.query,
        fragment=location.fragment,
        replace=True,
    )


def recovery_tokens(location: Location) -> RecoveryTokens | None:
    """Session tokens carried by a recovery link, or ``None`` if it is not a valid one."""
    params = _params(location.fragment)
    if "recovery" not in params.get("type", []):
        return None
    access = params.get("access_token", [""])[0]
    if not access:
        return None
    refresh = params.get("refresh_token", [""])[0] or None
    return RecoveryTokens(access_token=access, refresh_token=refresh)
