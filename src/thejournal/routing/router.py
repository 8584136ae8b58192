"""Keeps the UI language, the URL prefix and the stored preference in step.

A stored preference always wins. Without one, the first visit infers a
language from the browser locale, redirects to the matching URL prefix and
stores the inferred value so later visits never infer again. After that the
path is authoritative: a deep link to ``/zh-tw/post/42`` displays in Chinese
until the user explicitly switches.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Protocol

from thejournal.i18n.languages import (
    PREFERENCE_KEY,
    Language,
    coerce_language,
    detect_browser_language,
    language_from_path,
    localize,
    path_for_language,
)
from thejournal.i18n.store import PreferenceStore
from thejournal.i18n.translations import translate

from .navigation import Location, NavigationRequest, Navigator
from .recovery import DEFAULT_RECOVERY_PATH, recovery_redirect

logger = logging.getLogger("thejournal.routing.router")


class RouterState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    RESOLVING = "resolving"
    SETTLED = "settled"


class LocaleRouter:
    """Language state for one navigation session."""

    def __init__(
        self,
        navigator: Navigator,
        store: PreferenceStore,
        *,
        browser_locale: str | None = None,
        recovery_path: str = DEFAULT_RECOVERY_PATH,
        preference_key: str = PREFERENCE_KEY,
    ) -> None:
        self.navigator = navigator
        self.store = store
        self.browser_locale = browser_locale
        self.recovery_path = recovery_path
        self.preference_key = preference_key
        self.state = RouterState.UNINITIALIZED
        self.redirect: NavigationRequest | None = None
        self.language: Language = language_from_path(navigator.location.path)

    def start(self) -> NavigationRequest | None:
        """Resolve the session language once and correct the URL if needed.

        Recovery links are handled first: they are sent to the recovery page
        (in the resolved language) instead of merely having their prefix
        fixed. Returns the replace-navigation that was issued, if any. Calls
        after the first are no-ops.
        """
        if self.state is not RouterState.UNINITIALIZED:
            return None
        self.state = RouterState.RESOLVING

        stored = self._read_preference()
        target = stored or detect_browser_language(self.browser_locale)

        location = self.navigator.location
        request = recovery_redirect(location, target, self.recovery_path)
        if request is None:
            corrected = path_for_language(location.path, target)
            if corrected != location.path:
                request = NavigationRequest(
                    path=corrected,
                    query=location.query,
                    fragment=location.fragment,
                    replace=True,
                )

        if request is not None:
            logger.debug("redirecting %s -> %s", location.href, request.href)
            self.redirect = request
            self.navigator.navigate(request)

        if stored is None:
            self._write_preference(target)

        self.language = target
        self.state = RouterState.SETTLED
        return request

    def on_navigate(self, location: Location) -> None:
        """Follow the path prefix once settled."""
        if self.state is not RouterState.SETTLED:
            return
        path_language = language_from_path(location.path)
        if path_language != self.language:
            logger.debug("language follows path %s: %s", location.path, path_language)
            self.language = path_language

    def set_language(self, language: str, is_manual: bool = True) -> NavigationRequest:
        """Switch language and push the matching URL.

        A manual switch is stored and overrides any earlier preference. The
        in-memory language changes before the navigation is issued.
        """
        lang = coerce_language(language)
        if lang is None:
            raise ValueError(f"Unsupported language: {language!r}")

        if is_manual:
            self._write_preference(lang)

        self.language = lang
        location = self.navigator.location
        request = NavigationRequest(
            path=path_for_language(location.path, lang),
            query=location.query,
            fragment=location.fragment,
            replace=False,
        )
        self.navigator.navigate(request)
        return request

    def toggle_language(self) -> NavigationRequest:
        return self.set_language("zh-tw" if self.language == "en" else "en")

    def translate(self, key: str) -> str:
        return translate(key, self.language)

    def localize(self, path: str) -> str:
        return localize(path, self.language)

    def _read_preference(self) -> Language | None:
        # Any store failure reads as "nothing stored".
        try:
            raw = self.store.get(self.preference_key)
        except Exception as e:
            logger.warning("language preference unavailable, inferring instead: %s", e)
            return None
        return coerce_language(raw)

    def _write_preference(self, language: Language) -> None:
        try:
            self.store.set(self.preference_key, language)
        except Exception as e:
            logger.warning("could not store language preference %s: %s", language, e)


class ListeningNavigator(Navigator, Protocol):
    def listen(self, listener: Callable[[Location], None]) -> Callable[[], None]:  # pragma: no cover
        """Register a navigation listener; returns an unsubscribe callable."""


@contextmanager
def locale_session(
    navigator: ListeningNavigator,
    store: PreferenceStore,
    *,
    browser_locale: str | None = None,
    recovery_path: str = DEFAULT_RECOVERY_PATH,
    preference_key: str = PREFERENCE_KEY,
) -> Iterator[LocaleRouter]:
    """Run a :class:`LocaleRouter` for the lifetime of the ``with`` block."""
    router = LocaleRouter(
        navigator,
        store,
        browser_locale=browser_locale,
        recovery_path=recovery_path,
        preference_key=preference_key,
    )
    unsubscribe = navigator.listen(router.on_navigate)
    try:
        router.start()
        yield router
    finally:
        unsubscribe()
