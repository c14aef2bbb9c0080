"""Built-in phrase dictionaries for relative time and natural day rendering.

Each dictionary maps a phrase key to a template. Directional phrases are
keyed by (key, Direction); direction-less phrases by (key, None).
Pluralized keys hold "one::many" templates rendered by the plural template
engine with the bucket magnitude; fixed keys ("just-now", "moments",
"today", "tomorrow", "yesterday") hold literal text.

Python 3.11+. Zero external dependencies.
"""

from collections.abc import Mapping
from types import MappingProxyType

from humanphrase.enums import Direction

__all__ = [
    "BUILTIN_PHRASES",
    "DAY_KEYS",
    "ENGLISH",
    "FIXED_KEYS",
    "FRENCH",
    "GERMAN",
    "PLURAL_KEYS",
    "PhraseKey",
    "SPANISH",
]

PhraseKey = tuple[str, Direction | None]

_PAST = Direction.PAST
_FUTURE = Direction.FUTURE

# Keys rendered through the plural template engine
PLURAL_KEYS: tuple[str, ...] = ("minutes", "hours", "days", "weeks", "months", "years")

# Keys holding literal phrases
FIXED_KEYS: tuple[str, ...] = ("just-now", "moments")
DAY_KEYS: tuple[str, ...] = ("today", "tomorrow", "yesterday")

ENGLISH: Mapping[PhraseKey, str] = MappingProxyType({
    ("just-now", None): "right now",
    ("moments", _PAST): "moments ago",
    ("moments", _FUTURE): "moments from now",
    ("minutes", _PAST): "one minute ago::{0} minutes ago",
    ("minutes", _FUTURE): "one minute from now::{0} minutes from now",
    ("hours", _PAST): "one hour ago::{0} hours ago",
    ("hours", _FUTURE): "one hour from now::{0} hours from now",
    ("days", _PAST): "one day ago::{0} days ago",
    ("days", _FUTURE): "one day from now::{0} days from now",
    ("weeks", _PAST): "one week ago::{0} weeks ago",
    ("weeks", _FUTURE): "one week from now::{0} weeks from now",
    ("months", _PAST): "one month ago::{0} months ago",
    ("months", _FUTURE): "one month from now::{0} months from now",
    ("years", _PAST): "one year ago::{0} years ago",
    ("years", _FUTURE): "one year from now::{0} years from now",
    ("today", None): "today",
    ("tomorrow", None): "tomorrow",
    ("yesterday", None): "yesterday",
})

SPANISH: Mapping[PhraseKey, str] = MappingProxyType({
    ("just-now", None): "justo ahora",
    ("moments", _PAST): "hace unos instantes",
    ("moments", _FUTURE): "dentro de unos instantes",
    ("minutes", _PAST): "hace un minuto::hace {0} minutos",
    ("minutes", _FUTURE): "dentro de un minuto::dentro de {0} minutos",
    ("hours", _PAST): "hace una hora::hace {0} horas",
    ("hours", _FUTURE): "dentro de una hora::dentro de {0} horas",
    ("days", _PAST): "hace un día::hace {0} días",
    ("days", _FUTURE): "dentro de un día::dentro de {0} días",
    ("weeks", _PAST): "hace una semana::hace {0} semanas",
    ("weeks", _FUTURE): "dentro de una semana::dentro de {0} semanas",
    ("months", _PAST): "hace un mes::hace {0} meses",
    ("months", _FUTURE): "dentro de un mes::dentro de {0} meses",
    ("years", _PAST): "hace un año::hace {0} años",
    ("years", _FUTURE): "dentro de un año::dentro de {0} años",
    ("today", None): "hoy",
    ("tomorrow", None): "mañana",
    ("yesterday", None): "ayer",
})

FRENCH: Mapping[PhraseKey, str] = MappingProxyType({
    ("just-now", None): "à l'instant",
    ("moments", _PAST): "il y a quelques instants",
    ("moments", _FUTURE): "dans quelques instants",
    ("minutes", _PAST): "il y a une minute::il y a {0} minutes",
    ("minutes", _FUTURE): "dans une minute::dans {0} minutes",
    ("hours", _PAST): "il y a une heure::il y a {0} heures",
    ("hours", _FUTURE): "dans une heure::dans {0} heures",
    ("days", _PAST): "il y a un jour::il y a {0} jours",
    ("days", _FUTURE): "dans un jour::dans {0} jours",
    ("weeks", _PAST): "il y a une semaine::il y a {0} semaines",
    ("weeks", _FUTURE): "dans une semaine::dans {0} semaines",
    ("months", _PAST): "il y a un mois::il y a {0} mois",
    ("months", _FUTURE): "dans un mois::dans {0} mois",
    ("years", _PAST): "il y a un an::il y a {0} ans",
    ("years", _FUTURE): "dans un an::dans {0} ans",
    ("today", None): "aujourd'hui",
    ("tomorrow", None): "demain",
    ("yesterday", None): "hier",
})

GERMAN: Mapping[PhraseKey, str] = MappingProxyType({
    ("just-now", None): "gerade eben",
    ("moments", _PAST): "vor wenigen Augenblicken",
    ("moments", _FUTURE): "in wenigen Augenblicken",
    ("minutes", _PAST): "vor einer Minute::vor {0} Minuten",
    ("minutes", _FUTURE): "in einer Minute::in {0} Minuten",
    ("hours", _PAST): "vor einer Stunde::vor {0} Stunden",
    ("hours", _FUTURE): "in einer Stunde::in {0} Stunden",
    ("days", _PAST): "vor einem Tag::vor {0} Tagen",
    ("days", _FUTURE): "in einem Tag::in {0} Tagen",
    ("weeks", _PAST): "vor einer Woche::vor {0} Wochen",
    ("weeks", _FUTURE): "in einer Woche::in {0} Wochen",
    ("months", _PAST): "vor einem Monat::vor {0} Monaten",
    ("months", _FUTURE): "in einem Monat::in {0} Monaten",
    ("years", _PAST): "vor einem Jahr::vor {0} Jahren",
    ("years", _FUTURE): "in einem Jahr::in {0} Jahren",
    ("today", None): "heute",
    ("tomorrow", None): "morgen",
    ("yesterday", None): "gestern",
})

BUILTIN_PHRASES: Mapping[str, Mapping[PhraseKey, str]] = MappingProxyType({
    "en": ENGLISH,
    "es": SPANISH,
    "fr": FRENCH,
    "de": GERMAN,
})
