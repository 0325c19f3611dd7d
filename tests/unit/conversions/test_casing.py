"""Tests for slug, camel, snake and title casing."""

from __future__ import annotations

import pytest

from mikroformat.conversions.casing import to_camel_case, to_slug, to_snake_case, to_title_case

SAMPLES = [
    "Hello World",
    "  leading and trailing  ",
    "Ünïcödé -- text__here!!",
    "already-a-slug",
    "snake__case  with---mixed_separators",
    "a - b _ c",
]


class TestToSlug:
    def test_string(self):
        assert to_slug("Hello World") == "hello-world"

    def test_number(self):
        assert to_slug(198279187) == "198279187"

    def test_underscores_and_symbols(self):
        assert to_slug("Foo_Bar & Baz") == "foo-bar-baz"

    def test_edges_are_not_trimmed(self):
        assert to_slug(" Hello ") == "-hello-"

    @pytest.mark.parametrize("value", SAMPLES)
    def test_idempotent(self, value):
        assert to_slug(to_slug(value)) == to_slug(value)


class TestToCamelCase:
    def test_lowercase_words(self):
        assert to_camel_case("hello world") == "helloWorld"

    def test_capitalized_words(self):
        assert to_camel_case("Hello World") == "helloWorld"

    def test_several_words(self):
        assert to_camel_case("the quick brown fox") == "theQuickBrownFox"

    def test_digits_are_kept(self):
        assert to_camel_case("version 0 release") == "version0Release"


class TestToSnakeCase:
    def test_string(self):
        assert to_snake_case("Hello World") == "hello_world"

    def test_hyphens(self):
        assert to_snake_case("kebab-case-name") == "kebab_case_name"

    def test_underscore_runs_collapse(self):
        assert to_snake_case("a__b___c") == "a_b_c"

    @pytest.mark.parametrize("value", SAMPLES)
    def test_idempotent(self, value):
        assert to_snake_case(to_snake_case(value)) == to_snake_case(value)


class TestToTitleCase:
    def test_string(self):
        assert to_title_case("hello world") == "Hello World"

    def test_lowercases_rest(self):
        assert to_title_case("hELLO wORLD") == "Hello World"

    def test_keeps_whitespace(self):
        assert to_title_case("one  two\tthree") == "One  Two\tThree"
