"""Loading of the optional ``thejournal.toml`` project file.

Every setting has a default, so a project without the file behaves exactly as
one with ``version = 1`` and nothing else.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from thejournal.errors import JournalConfigError
from thejournal.i18n.languages import PREFERENCE_KEY
from thejournal.posts.listing import DEFAULT_PER_PAGE
from thejournal.posts.model import WORDS_PER_MINUTE
from thejournal.routing.recovery import DEFAULT_RECOVERY_PATH

CONFIG_FILENAME = "thejournal.toml"


@dataclass(frozen=True)
class I18nConfig:
    preference_file: Path = Path(".thejournal/preferences.json")
    preference_key: str = PREFERENCE_KEY


@dataclass(frozen=True)
class RoutingConfig:
    recovery_path: str = DEFAULT_RECOVERY_PATH


@dataclass(frozen=True)
class PostsConfig:
    per_page: int = DEFAULT_PER_PAGE
    words_per_minute: int = WORDS_PER_MINUTE


@dataclass(frozen=True)
class JournalConfig:
    version: int = 1
    i18n: I18nConfig = field(default_factory=I18nConfig)
    routing: RoutingConfig = field(default_factory=RoutingConfig)
    posts: PostsConfig = field(default_factory=PostsConfig)


def find_config(start: Path) -> Path | None:
    """Walk upward from `start` looking for ``thejournal.toml``."""
    cur = start.resolve()
    if cur.is_file():
        cur = cur.parent
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def _as_table(value: Any, *, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise JournalConfigError(f"Expected [{name}] to be a table.")
    return value


def _as_int(value: Any, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise JournalConfigError(f"Expected {name} to be an integer.")
    return value


def _as_str(value: Any, *, name: str) -> str:
    if not isinstance(value, str):
        raise JournalConfigError(f"Expected {name} to be a string.")
    return value


def load_config(config_path: Path | None = None, *, start: Path | None = None) -> JournalConfig:
    """Load and validate ``thejournal.toml``.

    Without an explicit `config_path` the file is searched for upward from
    `start` (default: the working directory); if none is found the defaults
    apply. An explicit path that does not exist is an error. A relative
    ``preference_file`` resolves against the config file's directory.
    """
    if config_path is None:
        config_path = find_config(start or Path.cwd())
        if config_path is None:
            return JournalConfig()

    try:
        raw = config_path.read_bytes()
    except FileNotFoundError as e:
        raise JournalConfigError(f"Missing config file: {config_path}") from e
    except OSError as e:
        raise JournalConfigError(f"Failed reading config file: {config_path}") from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise JournalConfigError(f"Config is not valid UTF-8: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise JournalConfigError(f"Invalid TOML in {config_path}: {e}") from e

    version = data.get("version")
    if version is None:
        raise JournalConfigError(f"Missing required `version = 1` in {config_path.name}.")
    version_i = _as_int(version, name="version")
    if version_i != 1:
        raise JournalConfigError(f"Unsupported config version: {version_i} (expected 1).")

    i18n_tbl = _as_table(data.get("i18n"), name="i18n")
    routing_tbl = _as_table(data.get("routing"), name="routing")
    posts_tbl = _as_table(data.get("posts"), name="posts")

    defaults = JournalConfig()

    if "preference_file" in i18n_tbl:
        preference_file = Path(_as_str(i18n_tbl["preference_file"], name="i18n.preference_file"))
    else:
        preference_file = defaults.i18n.preference_file
    if not preference_file.is_absolute():
        preference_file = config_path.parent / preference_file

    if "preference_key" in i18n_tbl:
        preference_key = _as_str(i18n_tbl["preference_key"], name="i18n.preference_key")
    else:
        preference_key = defaults.i18n.preference_key

    if "recovery_path" in routing_tbl:
        recovery_path = _as_str(routing_tbl["recovery_path"], name="routing.recovery_path")
    else:
        recovery_path = defaults.routing.recovery_path

    if "per_page" in posts_tbl:
        per_page = _as_int(posts_tbl["per_page"], name="posts.per_page")
    else:
        per_page = defaults.posts.per_page

    if "words_per_minute" in posts_tbl:
        words_per_minute = _as_int(posts_tbl["words_per_minute"], name="posts.words_per_minute")
    else:
        words_per_minute = defaults.posts.words_per_minute

    # Validation
    if not preference_key:
        raise JournalConfigError("Invalid config: i18n.preference_key must not be empty.")
    if not recovery_path.startswith("/"):
        raise JournalConfigError("Invalid config: routing.recovery_path must start with '/'.")
    if per_page < 1 or words_per_minute < 1:
        raise JournalConfigError("Invalid config: posts.per_page and posts.words_per_minute must be >= 1.")

    return JournalConfig(
        version=version_i,
        i18n=I18nConfig(preference_file=preference_file, preference_key=preference_key),
        routing=RoutingConfig(recovery_path=recovery_path),
        posts=PostsConfig(per_page=per_page, words_per_minute=words_per_minute),
    )
