"""Locale code handling shared by the registry, plural rules and formatters.

Callers may pass BCP-47 ("pt-BR") or POSIX ("pt_BR") codes in any case.
Everything below normalizes at the boundary so that registry keys, cache
keys and Babel lookups agree.

Python 3.11+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "locale_lookup_keys",
    "normalize_locale",
]

# Environment variables consulted for the system locale, highest priority first
_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Strip whitespace and use underscores as the subtag separator.

    Example:
        >>> normalize_locale(" pt-BR ")
        'pt_BR'
    """
    return locale_code.strip().replace("-", "_")


def locale_lookup_keys(locale_code: str) -> tuple[str, ...]:
    """Registry lookup keys for a locale, most specific first.

    Keys are lowercased so that "en-US", "en_US" and "EN_us" resolve to the
    same registry entry. A regional code also yields its bare language.

    Example:
        >>> locale_lookup_keys("es-ES")
        ('es_es', 'es')
        >>> locale_lookup_keys("fr")
        ('fr',)
    """
    key = normalize_locale(locale_code).lower()
    language = key.split("_", 1)[0]
    if language and language != key:
        return (key, language)
    return (key,)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parsed Babel locale for a code, memoized.

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale
        ValueError: If the code is not a well-formed locale identifier
    """
    # Babel loads CLDR data on import; defer until a locale is needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _strip_encoding(value: str) -> str:
    return normalize_locale(value.split(".", 1)[0])


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Best guess at the user's locale.

    Asks locale.getlocale() first, then LC_ALL, LC_MESSAGES and LANG.
    The "C" and "POSIX" pseudo-locales and encoding suffixes
    (".UTF-8") are ignored.

    Args:
        raise_on_failure: Raise instead of returning "en_US" when nothing
            usable is found

    Raises:
        RuntimeError: If raise_on_failure is set and no locale was found
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        detected, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        detected = None
    if detected and _strip_encoding(detected) not in _PSEUDO_LOCALES:
        return _strip_encoding(detected)

    for var in _LOCALE_ENV_VARS:
        value = _strip_encoding(os.environ.get(var, ""))
        if value not in _PSEUDO_LOCALES:
            return value

    if raise_on_failure:
        msg = "Could not determine system locale; set LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)
    return "en_US"
