"""Locale registry: the closed set of supported locales and the default."""

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


class Locale(enum.StrEnum):
    ES = "es"
    EN = "en"
    FR = "fr"
    DE = "de"
    IT = "it"


DEFAULT_LOCALE = Locale.ES

SUPPORTED_LOCALES: tuple[str, ...] = tuple(locale.value for locale in Locale)

_dir = Path(__file__).parent


@dataclass(frozen=True)
class LocaleRegistry:
    """Immutable description of the locales the app can render.

    ``names`` maps each code to its human-readable name and ``ai_languages``
    to the language name passed to the generative flows.
    """

    locales: tuple[str, ...]
    default: str
    names: Mapping[str, str] = field(default_factory=dict)
    ai_languages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.default not in self.locales:
            raise ValueError(f"Default locale {self.default!r} is not a supported locale")
        for label, mapping in (("names", self.names), ("ai_languages", self.ai_languages)):
            missing = set(self.locales) - set(mapping)
            if missing:
                raise ValueError(f"Locale {label} missing for: {sorted(missing)}")
        # Freeze the mappings so callers cannot mutate the registry
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))
        object.__setattr__(self, "ai_languages", MappingProxyType(dict(self.ai_languages)))

    def __contains__(self, code: object) -> bool:
        return code in self.locales

    def display_name(self, code: str) -> str:
        return self.names.get(code, self.names[self.default])

    def ai_language(self, code: str) -> str:
        return self.ai_languages.get(code, self.ai_languages[self.default])


REGISTRY = LocaleRegistry(
    locales=SUPPORTED_LOCALES,
    default=DEFAULT_LOCALE.value,
    names={
        Locale.ES: "Español",
        Locale.EN: "English",
        Locale.FR: "Français",
        Locale.DE: "Deutsch",
        Locale.IT: "Italiano",
    },
    ai_languages={
        Locale.ES: "Spanish",
        Locale.EN: "English",
        Locale.FR: "French",
        Locale.DE: "German",
        Locale.IT: "Italian",
    },
)
