"""humanphrase - natural-language quantity and time rendering.

Renders counts and time distances as human-facing phrases, with
locale-aware number formatting (Babel/CLDR) and per-locale plural rules.

Public API:
    build_plural_template - Build a renderer from "one::many" style templates
    pluralize - Alias of build_plural_template
    relative_time - "3 days ago" / "12 minutes from now" between instants
    natural_time - Alias of relative_time
    natural_day - "today" / "tomorrow" / "yesterday" or a short date
    format_delta - Render a signed millisecond delta or timedelta
    select_category - Plural category for a magnitude under a locale
    LocaleRegistry - Immutable table of plural rules and phrase dictionaries
    configure - Install the process-wide LocaleRegistry

Exceptions:
    HumanizeError - Base exception class
    MalformedTemplateError - Template does not split into 2, 3 or 4 segments
    MissingArgumentError - Phrase references an argument that was not passed

Submodules:
    humanphrase.template - Template parser, substitutor and renderer
    humanphrase.relative - Relative time classifier and renderer
    humanphrase.runtime - LocaleContext formatting and plural rules
    humanphrase.diagnostics - Error types and diagnostics
"""

from .diagnostics import (
    FormattingError,
    HumanizeError,
    MalformedTemplateError,
    MissingArgumentError,
)
from .enums import Category, Direction, TimeBucket
from .registry import LocaleRegistry, LocaleRules, configure, get_shared_registry
from .relative import (
    RelativeTimeFormatter,
    classify,
    format_delta,
    get_relative_time_formatter,
    natural_day,
    natural_time,
    relative_time,
)
from .runtime import select_category
from .template import PluralRenderer, Template, build_plural_template, parse_template, pluralize

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("humanphrase")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Category",
    "Direction",
    "FormattingError",
    "HumanizeError",
    "LocaleRegistry",
    "LocaleRules",
    "MalformedTemplateError",
    "MissingArgumentError",
    "PluralRenderer",
    "RelativeTimeFormatter",
    "Template",
    "TimeBucket",
    "__version__",
    "build_plural_template",
    "classify",
    "configure",
    "format_delta",
    "get_relative_time_formatter",
    "get_shared_registry",
    "natural_day",
    "natural_time",
    "parse_template",
    "pluralize",
    "relative_time",
    "select_category",
]
