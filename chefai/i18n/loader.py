"""Dictionary loading with a single fallback to the default locale."""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType

from chefai.i18n import DEFAULT_LOCALE, Locale, _dir

_log = logging.getLogger(__name__)

Dictionary = dict[str, str]
DictionaryLoader = Callable[[], Awaitable[Dictionary]]


class DictionaryLoadError(RuntimeError):
    """Raised when the default locale's dictionary cannot be loaded."""


def _json_loader(locale: Locale) -> DictionaryLoader:
    path = _dir / f"{locale.value}.json"

    async def load() -> Dictionary:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"{path.name} must contain a JSON object")
        return data

    return load


def _check_exhaustive(loaders: Mapping[str, DictionaryLoader]) -> None:
    missing = [locale.value for locale in Locale if locale not in loaders]
    if missing:
        raise RuntimeError(f"No dictionary loader registered for: {missing}")


LOADERS: Mapping[str, DictionaryLoader] = MappingProxyType(
    {locale.value: _json_loader(locale) for locale in Locale}
)
_check_exhaustive(LOADERS)


async def load_dictionary(
    locale: str,
    loaders: Mapping[str, DictionaryLoader] = LOADERS,
    default: str = DEFAULT_LOCALE.value,
) -> Dictionary:
    """Load the dictionary for ``locale``.

    Falls back to the default locale's dictionary once when no loader is
    registered for ``locale`` or when its load fails. A failure of the default
    load raises :class:`DictionaryLoadError`.
    """
    loader = loaders.get(locale)
    if loader is None:
        _log.warning("No dictionary for locale %r, using %r", locale, default)
    else:
        try:
            return await loader()
        except Exception as exc:
            if locale == default:
                raise DictionaryLoadError(f"Could not load default dictionary {default!r}") from exc
            _log.warning(
                "Dictionary for locale %r failed to load (%s), using %r", locale, exc, default
            )

    default_loader = loaders.get(default)
    if default_loader is None:
        raise DictionaryLoadError(f"No dictionary loader registered for default {default!r}")
    try:
        return await default_loader()
    except Exception as exc:
        raise DictionaryLoadError(f"Could not load default dictionary {default!r}") from exc
