"""Path-based locale resolution.

Only the position of a segment is inspected: the first non-empty segment of
the path is the locale candidate. Callers route locale-prefixed paths only.
"""

from urllib.parse import urlsplit

from chefai.i18n import REGISTRY, LocaleRegistry


def _segments(path: str) -> list[str]:
    return [s for s in urlsplit(path or "/").path.split("/") if s]


def resolve_locale(path: str, registry: LocaleRegistry = REGISTRY) -> str:
    """Return the locale named by the first path segment, or the default."""
    segments = _segments(path)
    if segments and segments[0] in registry:
        return segments[0]
    return registry.default


def has_locale_prefix(path: str, registry: LocaleRegistry = REGISTRY) -> bool:
    segments = _segments(path)
    return bool(segments) and segments[0] in registry


def strip_locale(path: str, registry: LocaleRegistry = REGISTRY) -> str:
    """Drop the leading locale segment: ``/en/dashboard`` -> ``/dashboard``."""
    segments = _segments(path)
    if segments and segments[0] in registry:
        segments = segments[1:]
    return "/" + "/".join(segments)


def localize_path(path: str, locale: str, registry: LocaleRegistry = REGISTRY) -> str:
    """Return ``path`` under ``locale``, replacing any existing locale prefix."""
    if locale not in registry:
        locale = registry.default
    rest = strip_locale(path, registry)
    return f"/{locale}" if rest == "/" else f"/{locale}{rest}"
