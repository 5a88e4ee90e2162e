"""Per-render locale context: resolve the locale, then await its dictionary."""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from chefai.i18n import REGISTRY, LocaleRegistry
from chefai.i18n.loader import LOADERS, DictionaryLoader, load_dictionary
from chefai.i18n.resolver import resolve_locale


class RenderStage(enum.StrEnum):
    PATH_RECEIVED = "path-received"
    LOCALE_RESOLVED = "locale-resolved"
    DICTIONARY_LOADED = "dictionary-loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class LocaleContext:
    locale: str
    dictionary: Mapping[str, str]
    registry: LocaleRegistry = REGISTRY

    @property
    def display_name(self) -> str:
        return self.registry.display_name(self.locale)

    @property
    def ai_language(self) -> str:
        return self.registry.ai_language(self.locale)

    def t(self, key: str) -> str | None:
        return self.dictionary.get(key)


class LocaleRender:
    """One render's pass through path-received -> locale-resolved -> dictionary-loaded."""

    def __init__(
        self,
        path: str,
        registry: LocaleRegistry = REGISTRY,
        loaders: Mapping[str, DictionaryLoader] = LOADERS,
    ):
        self.path = path
        self.stage = RenderStage.PATH_RECEIVED
        self.locale: str | None = None
        self._registry = registry
        self._loaders = loaders

    async def run(self) -> LocaleContext:
        if self.stage != RenderStage.PATH_RECEIVED:
            raise RuntimeError(f"Render for {self.path!r} already ran (stage: {self.stage})")

        self.locale = resolve_locale(self.path, self._registry)
        self.stage = RenderStage.LOCALE_RESOLVED

        try:
            dictionary = await load_dictionary(
                self.locale, self._loaders, default=self._registry.default
            )
        except Exception:
            self.stage = RenderStage.FAILED
            raise

        self.stage = RenderStage.DICTIONARY_LOADED
        return LocaleContext(
            locale=self.locale,
            dictionary=MappingProxyType(dictionary),
            registry=self._registry,
        )


async def compose_locale_context(
    path: str,
    registry: LocaleRegistry = REGISTRY,
    loaders: Mapping[str, DictionaryLoader] = LOADERS,
) -> LocaleContext:
    return await LocaleRender(path, registry, loaders).run()
