"""Plural Template Engine.

Composes the parser, the plural selector and the placeholder substitutor:

    >>> renderer = build_plural_template("{0}::nothing::one thing::{0} things")
    >>> renderer.render(0)
    'nothing'
    >>> renderer.render(2)
    '2 things'
    >>> renderer = build_plural_template(
    ...     "There {0} on {1}.::are no files::is one file::are {2} files"
    ... )
    >>> renderer.render(1, "disk")
    'There is one file on disk.'

Python 3.11+.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from humanphrase.constants import TEMPLATE_DELIMITER
from humanphrase.enums import Category
from humanphrase.runtime.plural_rules import (
    Magnitude,
    PluralRule,
    default_plural_rule,
    ensure_magnitude,
)
from humanphrase.template.parser import Template, parse_template
from humanphrase.template.substitution import substitute

if TYPE_CHECKING:
    from humanphrase.registry import LocaleRegistry

__all__ = ["PluralRenderer", "build_plural_template", "pluralize"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PluralRenderer:
    """Template bound to a locale, ready to render magnitudes.

    Stateless beyond the binding: render() is deterministic and may be
    called concurrently from any number of threads.

    Attributes:
        template: Parsed phrase variants
        locale_code: Locale used for formatting numbers and dates
        rule: Plural rule of the locale
    """

    template: Template
    locale_code: str
    rule: PluralRule = default_plural_rule

    def category(self, magnitude: Magnitude) -> Category:
        """Plural category this renderer selects for a magnitude.

        Raises:
            TypeError: If magnitude is not a number
        """
        return self.rule(ensure_magnitude(magnitude))

    def render(self, magnitude: Magnitude, *args: object) -> str:
        """Render the variant selected by the magnitude.

        Args:
            magnitude: Count bound to {0} and used for category selection
            *args: Extra arguments bound to {1}, {2}, ...

        Returns:
            Rendered phrase (wrapped in the wrapper phrase, if any)

        Raises:
            TypeError: If magnitude is not a number
            MissingArgumentError: If the chosen phrase references an
                argument that was not supplied
        """
        category = self.category(magnitude)
        phrase = self.template.phrase_for(category)
        text = substitute(phrase, magnitude, args, self.locale_code)
        if self.template.wrapper is None:
            return text
        return substitute(self.template.wrapper, magnitude, args, self.locale_code, primary=text)


def build_plural_template(
    source: str | Sequence[str] | Template,
    locale: str | None = None,
    *,
    wrapper: str | None = None,
    delimiter: str = TEMPLATE_DELIMITER,
    registry: LocaleRegistry | None = None,
) -> PluralRenderer:
    """Build a renderer from a raw template or explicit variants.

    Args:
        source: Delimited raw template, a (none, one, many) triple, or a
            Template
        locale: Locale code; None uses the registry's default locale
        wrapper: Carrier phrase whose {0} receives the chosen variant;
            overrides the wrapper segment of a 4-segment raw template
        delimiter: Segment delimiter for raw templates
        registry: Registry providing the plural rule; None uses the shared one

    Returns:
        PluralRenderer bound to the locale

    Raises:
        MalformedTemplateError: If the raw template or triple is malformed

    Examples:
        >>> build_plural_template("one thing::{0} things").render(-1)
        '-1 things'
        >>> build_plural_template(
        ...     ("No hay ficheros", "Hay un fichero", "Hay {0,number} ficheros"),
        ...     "es",
        ...     wrapper="{0}.",
        ... ).render(2000000)
        'Hay 2.000.000 ficheros.'
    """
    if registry is None:
        from humanphrase.registry import get_shared_registry  # noqa: PLC0415 - circular

        registry = get_shared_registry()
    locale_code = registry.default_locale if locale is None else locale

    if isinstance(source, Template):
        template = source
    elif isinstance(source, str):
        template = parse_template(source, delimiter)
    else:
        template = Template.from_variants(source)

    if wrapper is not None:
        template = dataclasses.replace(template, wrapper=wrapper)

    logger.debug("Built %d-variant template for locale %s", template.arity, locale_code)
    return PluralRenderer(template, locale_code, registry.plural_rule(locale_code))


pluralize = build_plural_template
