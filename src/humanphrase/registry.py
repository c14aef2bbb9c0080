"""Locale Rule Registry.

Immutable configuration object mapping locale codes to a plural rule and a
phrase dictionary. Registries are built once at start-up and only read
afterwards; "registering" a locale derives a new registry.

Lookup policy:
    - Locale codes are normalized (BCP-47 or POSIX, case-insensitive) and
      matched on the full code first, then on the bare language.
    - An unregistered locale is not an error: it gets the default plural
      rule and the default locale's phrases.
    - A phrase missing from a registered locale falls back to the default
      locale's dictionary, then to the English built-ins.

Python 3.11+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from humanphrase.constants import DEFAULT_LOCALE, LOCALE_ENV_VAR
from humanphrase.enums import Direction
from humanphrase.locale_utils import get_system_locale, locale_lookup_keys
from humanphrase.phrases import BUILTIN_PHRASES, ENGLISH, PhraseKey
from humanphrase.runtime.plural_rules import (
    PluralRule,
    cldr_plural_rule,
    default_plural_rule,
    french_plural_rule,
)

__all__ = [
    "LocaleRegistry",
    "LocaleRules",
    "configure",
    "get_shared_registry",
]

logger = logging.getLogger(__name__)


def _freeze_phrases(phrases: Mapping[PhraseKey, str]) -> Mapping[PhraseKey, str]:
    frozen: dict[PhraseKey, str] = {}
    for key, template in phrases.items():
        if (
            not isinstance(key, tuple)
            or len(key) != 2
            or not isinstance(key[0], str)
            or not (key[1] is None or isinstance(key[1], Direction))
        ):
            msg = f"Phrase key must be (str, Direction | None), got {key!r}"
            raise ValueError(msg)
        if not isinstance(template, str):
            msg = f"Phrase for {key!r} must be a string, got {type(template).__name__}"
            raise TypeError(msg)
        frozen[key] = template
    return MappingProxyType(frozen)


@dataclass(frozen=True, slots=True)
class LocaleRules:
    """Plural rule and phrase dictionary registered for one locale.

    Attributes:
        locale_code: Locale identifier as registered (e.g., "es", "pt-BR")
        rule: Plural rule mapping a magnitude to a Category
        phrases: Phrase templates keyed by (phrase key, direction)
    """

    locale_code: str
    rule: PluralRule = default_plural_rule
    phrases: Mapping[PhraseKey, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and freeze the entry.

        Raises:
            ValueError: If locale_code is empty or a phrase key is malformed
            TypeError: If rule is not callable or a phrase is not a string
        """
        if not isinstance(self.locale_code, str) or not self.locale_code.strip():
            msg = "locale_code must be a non-empty string"
            raise ValueError(msg)
        if not callable(self.rule):
            msg = "rule must be callable"
            raise TypeError(msg)
        object.__setattr__(self, "phrases", _freeze_phrases(self.phrases))


@dataclass(frozen=True, slots=True)
class LocaleRegistry:
    """Immutable table of locale rules with a default locale.

    Safe for unsynchronized concurrent reads: the entry table is a
    read-only mapping and every entry is frozen.

    Attributes:
        entries: LocaleRules keyed by normalized, lowercased locale code
        default_locale: Locale used when callers pass no locale

    Example:
        >>> registry = LocaleRegistry.builtin()
        >>> registry.phrase("just-now", None, "es")
        'justo ahora'
        >>> custom = registry.with_locale("pt", phrases={("just-now", None): "agora mesmo"})
        >>> custom.phrase("just-now", None, "pt-BR")
        'agora mesmo'
    """

    entries: Mapping[str, LocaleRules] = field(default_factory=dict)
    default_locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        """Validate and freeze the table.

        Raises:
            ValueError: If default_locale is empty
            TypeError: If an entry is not a LocaleRules instance
        """
        if not isinstance(self.default_locale, str) or not self.default_locale.strip():
            msg = "default_locale must be a non-empty string"
            raise ValueError(msg)
        frozen: dict[str, LocaleRules] = {}
        for rules in self.entries.values():
            if not isinstance(rules, LocaleRules):
                msg = f"Registry entries must be LocaleRules, got {type(rules).__name__}"
                raise TypeError(msg)
            frozen[locale_lookup_keys(rules.locale_code)[0]] = rules
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    @classmethod
    def builtin(cls, default_locale: str = DEFAULT_LOCALE) -> LocaleRegistry:
        """Registry with the built-in locales: en, es, fr, de.

        English and Spanish use the default "one / other" rule, French the
        three-bucket French rule and German the CLDR rule from Babel.
        """
        rules = {
            "en": default_plural_rule,
            "es": default_plural_rule,
            "fr": french_plural_rule,
            "de": cldr_plural_rule("de"),
        }
        entries = {
            code: LocaleRules(code, rule=rule, phrases=BUILTIN_PHRASES[code])
            for code, rule in rules.items()
        }
        return cls(entries=entries, default_locale=default_locale)

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> LocaleRegistry:
        """Built-in registry whose default locale comes from the environment.

        Reads HUMANPHRASE_LOCALE, else the detected system locale.
        """
        env = os.environ if environ is None else environ
        configured = env.get(LOCALE_ENV_VAR, "").strip()
        default_locale = configured.split(".")[0] if configured else get_system_locale()
        logger.debug("Default locale from environment: %s", default_locale)
        return cls.builtin(default_locale=default_locale)

    @property
    def locales(self) -> tuple[str, ...]:
        """Registered locale codes, in registration order."""
        return tuple(rules.locale_code for rules in self.entries.values())

    def __contains__(self, locale_code: object) -> bool:
        return isinstance(locale_code, str) and self.resolve(locale_code) is not None

    def with_locale(
        self,
        locale_code: str,
        *,
        rule: PluralRule | None = None,
        phrases: Mapping[PhraseKey, str] | None = None,
    ) -> LocaleRegistry:
        """Derive a registry with a locale added or extended.

        Registering an existing locale keeps its rule unless a new one is
        given and merges the new phrases over the existing ones.

        Args:
            locale_code: Locale to register
            rule: Plural rule (default rule for new locales when omitted)
            phrases: Phrase templates keyed by (phrase key, direction)

        Returns:
            New LocaleRegistry; self is unchanged
        """
        key = locale_lookup_keys(locale_code)[0]
        existing = self.entries.get(key)
        merged: dict[PhraseKey, str] = dict(existing.phrases) if existing else {}
        merged.update(phrases or {})
        if rule is None:
            rule = existing.rule if existing else default_plural_rule
        entries = dict(self.entries)
        entries[key] = LocaleRules(locale_code, rule=rule, phrases=merged)
        return LocaleRegistry(entries=entries, default_locale=self.default_locale)

    def with_default_locale(self, locale_code: str) -> LocaleRegistry:
        """Derive a registry with a different default locale."""
        return LocaleRegistry(entries=self.entries, default_locale=locale_code)

    def resolve(self, locale: str | None) -> LocaleRules | None:
        """Find the rules for a locale; None if it is not registered.

        Args:
            locale: Locale code; None uses the default locale
        """
        code = self.default_locale if locale is None else locale
        for key in locale_lookup_keys(code):
            rules = self.entries.get(key)
            if rules is not None:
                return rules
        return None

    def plural_rule(self, locale: str | None = None) -> PluralRule:
        """Plural rule for a locale, the default rule when unregistered."""
        rules = self.resolve(locale)
        if rules is None:
            logger.debug("No plural rule for locale '%s'; using default rule", locale)
            return default_plural_rule
        return rules.rule

    def phrase(self, key: str, direction: Direction | None, locale: str | None = None) -> str:
        """Phrase template for a key and direction.

        Args:
            key: Phrase key (e.g., "minutes", "just-now")
            direction: PAST/FUTURE for directional phrases, None otherwise
            locale: Locale code; None uses the default locale

        Returns:
            Phrase template from the locale, the default locale or English

        Raises:
            KeyError: If no dictionary defines the phrase
        """
        phrase_key: PhraseKey = (key, direction)
        candidates = (self.resolve(locale), self.resolve(None))
        for rules in candidates:
            if rules is not None and phrase_key in rules.phrases:
                return rules.phrases[phrase_key]
            logger.debug("Phrase %s missing for locale '%s'; falling back", phrase_key, locale)
        if phrase_key in ENGLISH:
            return ENGLISH[phrase_key]
        msg = f"No phrase registered for {key!r} ({direction})"
        raise KeyError(msg)


# Process-wide registry, installed once at start-up.
# Initialized lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: LocaleRegistry | None = None


def get_shared_registry() -> LocaleRegistry:
    """Get the process-wide registry.

    Returns the registry installed by configure(), or the built-in registry
    (default locale "en") when none was installed.
    """
    global _SHARED_REGISTRY  # noqa: PLW0603
    if _SHARED_REGISTRY is None:
        _SHARED_REGISTRY = LocaleRegistry.builtin()
    return _SHARED_REGISTRY


def configure(registry: LocaleRegistry) -> None:
    """Install the process-wide registry.

    A configuration-time operation: call it once before concurrent use
    begins. Functions that receive an explicit registry ignore it.

    Raises:
        TypeError: If registry is not a LocaleRegistry
    """
    global _SHARED_REGISTRY  # noqa: PLW0603
    if not isinstance(registry, LocaleRegistry):
        msg = f"Expected LocaleRegistry, got {type(registry).__name__}"
        raise TypeError(msg)
    _SHARED_REGISTRY = registry
    logger.info(
        "Installed locale registry: default=%s locales=%s",
        registry.default_locale,
        ", ".join(registry.locales),
    )
