"""i18n state: the locale of the current page and its translations dict."""

import logging
from urllib.parse import urlsplit

import reflex as rx

from chefai.i18n import DEFAULT_LOCALE, REGISTRY
from chefai.i18n.composer import compose_locale_context
from chefai.i18n.loader import DictionaryLoadError
from chefai.i18n.negotiation import locale_redirect
from chefai.i18n.resolver import localize_path, resolve_locale

_log = logging.getLogger(__name__)


class I18nState(rx.State):
    active_locale: str = DEFAULT_LOCALE.value
    translations: dict[str, str] = {}
    # Pages render a spinner until the dictionary for the locale has loaded
    dictionary_ready: bool = False
    load_failed: bool = False

    @rx.var
    def locale_name(self) -> str:
        return REGISTRY.display_name(self.active_locale)

    async def load_locale(self):
        """Resolve the locale of the requested path and load its dictionary."""
        path = self.router.page.raw_path
        locale = resolve_locale(path)
        if self.dictionary_ready and locale == self.active_locale:
            return
        try:
            context = await compose_locale_context(path)
        except DictionaryLoadError:
            _log.exception("No dictionary available for %s", path)
            self.dictionary_ready = False
            self.load_failed = True
            raise
        self.active_locale = context.locale
        self.translations = dict(context.dictionary)
        self.load_failed = False
        self.dictionary_ready = True

    def redirect_to_locale(self):
        """Send paths without a locale (or a bare locale root) to a localized page."""
        target = locale_redirect(
            self.router.page.raw_path, self.router.headers.accept_language
        )
        if target is not None:
            return rx.redirect(target)

    def switch_locale(self, locale: str):
        if locale not in REGISTRY or locale == self.active_locale:
            return
        raw_path = self.router.page.raw_path
        target = localize_path(raw_path, locale)
        query = urlsplit(raw_path).query
        if query:
            target = f"{target}?{query}"
        return rx.redirect(target)
