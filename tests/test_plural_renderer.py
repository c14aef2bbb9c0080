"""Tests for the plural template engine.

Covers:
- Scenario outputs for two-, three- and four-segment templates
- Negative magnitudes select the many variant
- Wrapper phrases and extra arguments
- Locale binding through the registry
- Render-time argument errors and build-time template errors
- Properties: routing by magnitude, determinism, form equivalence
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from humanphrase import (
    Category,
    LocaleRegistry,
    MalformedTemplateError,
    MissingArgumentError,
    PluralRenderer,
    Template,
    build_plural_template,
    pluralize,
)
from humanphrase.runtime.locale_context import LocaleContext
from humanphrase.runtime.plural_rules import french_plural_rule
from tests.strategies import integer_magnitudes, magnitudes, phrase_triples

FILES = "There {0} on {1}.::are no files::is one file::are {2} files"


class TestThreeVariantTemplates:
    """none::one::many templates."""

    @pytest.mark.parametrize(
        ("magnitude", "expected"),
        [
            (0, "nothing"),
            (1, "one thing"),
            (2, "2 things"),
            (1000, "1,000 things"),
            (-1, "-1 things"),
            (1.5, "1.5 things"),
        ],
    )
    def test_scenarios(self, magnitude: int | float, expected: str) -> None:
        renderer = build_plural_template("{0}::nothing::one thing::{0} things")
        assert renderer.render(magnitude) == expected

    def test_without_wrapper(self) -> None:
        renderer = build_plural_template("nothing::one thing::{0} things")
        assert renderer.render(0) == "nothing"
        assert renderer.render(7) == "7 things"

    def test_explicit_variants(self) -> None:
        renderer = build_plural_template(("nothing", "one thing", "{0} things"))
        assert renderer.render(3) == "3 things"

    def test_prebuilt_template(self) -> None:
        template = Template.from_variants(("nothing", "one thing", "{0} things"))
        assert build_plural_template(template).render(1) == "one thing"


class TestTwoVariantTemplates:
    """one::many templates route zero to the many variant."""

    @pytest.mark.parametrize(
        ("magnitude", "expected"),
        [(0, "0 things"), (1, "one thing"), (-1, "-1 things"), (2, "2 things")],
    )
    def test_scenarios(self, magnitude: int, expected: str) -> None:
        assert build_plural_template("one thing::{0} things").render(magnitude) == expected


class TestWrapperTemplates:
    """wrapper::none::one::many templates embed the variant in a carrier phrase."""

    def test_zero(self) -> None:
        assert build_plural_template(FILES).render(0, "disk") == "There are no files on disk."

    def test_one(self) -> None:
        assert build_plural_template(FILES).render(1, "disk") == "There is one file on disk."

    def test_many_with_extra_argument(self) -> None:
        result = build_plural_template(FILES).render(1000, "disk", 1000)
        assert result == "There are 1,000 files on disk."

    def test_negative_selects_many(self) -> None:
        result = build_plural_template(FILES).render(-1, "disk", -1)
        assert result == "There are -1 files on disk."

    def test_whitespace_around_segments(self) -> None:
        renderer = build_plural_template(
            "There {0} on {1}. :: are no files::is one file::  are {2} files"
        )
        assert renderer.render(1, "disk") == "There is one file on disk."

    def test_spanish_wrapper(self) -> None:
        renderer = build_plural_template(
            "{0}.::No hay ficheros::Hay un fichero::Hay {0,number} ficheros", "es"
        )
        assert renderer.render(0) == "No hay ficheros."
        assert renderer.render(1) == "Hay un fichero."
        assert renderer.render(2000000) == "Hay 2.000.000 ficheros."

    def test_wrapper_keyword(self) -> None:
        renderer = build_plural_template(
            ("No hay ficheros", "Hay un fichero", "Hay {0,number} ficheros"),
            "es",
            wrapper="{0}.",
        )
        assert renderer.render(2000000) == "Hay 2.000.000 ficheros."

    def test_wrapper_keyword_overrides_segment(self) -> None:
        renderer = build_plural_template("[{0}]::none::one::many", wrapper="<{0}>")
        assert renderer.render(1) == "<one>"


class TestMagnitudeTypes:
    """Integers, floats and Decimals are all accepted."""

    def test_integral_float_is_one(self) -> None:
        assert build_plural_template("one::{0} many").render(1.0) == "one"

    def test_decimal_one(self) -> None:
        assert build_plural_template("one::{0} many").render(Decimal("1.00")) == "one"

    @pytest.mark.parametrize("bad", ["3", None, True, [1]])
    def test_non_numeric_magnitude(self, bad: object) -> None:
        with pytest.raises(TypeError):
            build_plural_template("one::many").render(bad)  # type: ignore[arg-type]


class TestLocaleBinding:
    """The renderer takes its rule from the registry and formats for its locale."""

    def test_default_locale_from_registry(self) -> None:
        registry = LocaleRegistry.builtin(default_locale="de")
        renderer = build_plural_template("ein Ding::{0} Dinge", registry=registry)
        assert renderer.locale_code == "de"
        assert renderer.render(1234.5) == "1.234,5 Dinge"

    def test_french_rule(self) -> None:
        renderer = build_plural_template("rien::{0} chose::{0} choses", "fr")
        assert renderer.rule is french_plural_rule
        assert renderer.render(1.5) == "1,5 chose"
        assert renderer.render(2) == "2 choses"
        assert renderer.render(0) == "rien"

    def test_unknown_locale_uses_default_rule(self) -> None:
        renderer = build_plural_template("one::{0} many", "xx-UNKNOWN")
        assert renderer.render(1) == "one"
        assert renderer.render(3) == "3 many"

    def test_custom_rule_from_registry(self) -> None:
        registry = LocaleRegistry.builtin().with_locale(
            "xx", rule=lambda n: Category.ONE
        )
        assert build_plural_template("one::many", "xx", registry=registry).render(5) == "one"

    def test_pluralize_alias(self) -> None:
        assert pluralize is build_plural_template


class TestErrors:
    """Malformed templates fail at build time, missing arguments at render time."""

    @pytest.mark.parametrize("raw", ["---", "a::b::c::d::e"])
    def test_malformed(self, raw: str) -> None:
        with pytest.raises(MalformedTemplateError):
            build_plural_template(raw)

    def test_missing_argument_in_variant(self) -> None:
        renderer = build_plural_template(FILES)
        with pytest.raises(MissingArgumentError) as exc_info:
            renderer.render(5, "disk")
        assert exc_info.value.index == 2

    def test_missing_argument_in_wrapper(self) -> None:
        renderer = build_plural_template(FILES)
        with pytest.raises(MissingArgumentError) as exc_info:
            renderer.render(1)
        assert exc_info.value.index == 1

    def test_missing_argument_only_for_chosen_variant(self) -> None:
        renderer = build_plural_template(FILES)
        assert renderer.render(0, "disk") == "There are no files on disk."


class TestRendererProperties:
    """Routing and determinism over generated magnitudes."""

    @given(k=integer_magnitudes)
    def test_three_variant_routing(self, k: int) -> None:
        assume(k not in (0, 1))
        renderer = build_plural_template("zero::single::{0} items")
        expected = LocaleContext.create("en").format_number(k)
        assert renderer.render(k) == f"{expected} items"

    @given(k=integer_magnitudes)
    def test_two_variant_routing(self, k: int) -> None:
        renderer = build_plural_template("single::{0} items")
        if k == 1:
            assert renderer.render(k) == "single"
        else:
            expected = LocaleContext.create("en").format_number(k)
            assert renderer.render(k) == f"{expected} items"

    @given(m=magnitudes)
    def test_render_is_deterministic(self, m: int | float | Decimal) -> None:
        renderer = build_plural_template("{0}::none::one::{0} many")
        assert renderer.render(m) == renderer.render(m)

    @given(variants=phrase_triples, m=st.integers(min_value=-5, max_value=5))
    def test_raw_and_triple_forms_agree(self, variants: tuple[str, str, str], m: int) -> None:
        from_raw = build_plural_template("::".join(variants))
        from_triple = build_plural_template(variants)
        assert from_raw.render(m) == from_triple.render(m)

    @given(m=magnitudes)
    def test_category_matches_rendered_variant(self, m: int | float | Decimal) -> None:
        renderer = build_plural_template("none::one::many")
        assert isinstance(renderer, PluralRenderer)
        assert renderer.render(m) == renderer.category(m).value


class TestConcurrentRendering:
    """One renderer shared across threads yields the same output as serial calls."""

    def test_thread_pool(self) -> None:
        from concurrent.futures import ThreadPoolExecutor

        renderer = build_plural_template(FILES, "es")
        magnitudes_in = [0, 1, *range(2, 200)]
        serial = [renderer.render(m, "disco", m) for m in magnitudes_in]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(lambda m: renderer.render(m, "disco", m), magnitudes_in))
        assert parallel == serial
