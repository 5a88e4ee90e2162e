"""Accept-Language negotiation for paths that arrive without a locale prefix."""

import math

from chefai.i18n import REGISTRY, LocaleRegistry
from chefai.i18n.resolver import has_locale_prefix, resolve_locale

# Paths served without a locale prefix
_IGNORED_PATHS = {"/manifest.json", "/favicon.ico", "/logo.png"}
_IGNORED_PREFIXES = ("/api/", "/admin", "/_")


def parse_accept_language(header: str | None) -> list[str]:
    """Return language tags ordered by descending q-value.

    Ties keep header order and ``q=0`` entries are dropped. A malformed
    q-value (unparsable, non-finite or above 1) counts as 1.
    """
    if not header:
        return []
    weighted: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        tag = pieces[0]
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 1.0
                if not math.isfinite(quality) or quality > 1:
                    quality = 1.0
        if quality <= 0:
            continue
        weighted.append((-quality, index, tag))
    return [tag for _, _, tag in sorted(weighted)]


def negotiate_locale(header: str | None, registry: LocaleRegistry = REGISTRY) -> str:
    for tag in parse_accept_language(header):
        tag = tag.lower()
        if tag in registry:
            return tag
        primary = tag.split("-", 1)[0]
        if primary in registry:
            return primary
    return registry.default


def locale_redirect(
    path: str, accept_language: str | None, registry: LocaleRegistry = REGISTRY
) -> str | None:
    """Return where ``path`` should be redirected to, or None to serve it as is.

    Paths without a locale get the negotiated locale prepended; a bare locale
    root (``/es``) goes to that locale's landing page.
    """
    path = path or "/"
    if path in _IGNORED_PATHS or path.startswith(_IGNORED_PREFIXES):
        return None
    if has_locale_prefix(path, registry):
        locale = resolve_locale(path, registry)
        if path.rstrip("/") == f"/{locale}":
            return f"/{locale}/landing"
        return None
    locale = negotiate_locale(accept_language, registry)
    if path == "/":
        return f"/{locale}/landing"
    return f"/{locale}{path}"
