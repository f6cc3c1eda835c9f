"""
Tests for name generation.

Tests cover:
- Case-style normalisation
- NameResolver uniqueness, determinism and reset scope
"""

import pytest
from conftest import make_token

from chuk_mcp_tokens.constants import StringCase
from chuk_mcp_tokens.errors import NameCollisionError
from chuk_mcp_tokens.models import TokenGroup
from chuk_mcp_tokens.naming import NameResolver
from chuk_mcp_tokens.naming import resolver as resolver_module
from chuk_mcp_tokens.naming.case import (
    change_case,
    code_safe_variable_name,
    split_words,
    strip_leading_underscore,
)


class TestCaseStyles:
    """Tests for case-style helpers."""

    def test_split_words(self):
        """Splits on separators and case boundaries."""
        assert split_words("ui-teal") == ["ui", "teal"]
        assert split_words("backgroundColor") == ["background", "Color"]
        assert split_words("HTTPServer") == ["HTTP", "Server"]
        assert split_words("  spaced   out ") == ["spaced", "out"]

    @pytest.mark.parametrize(
        "style,expected",
        [
            (StringCase.CAMEL, "uiTealLight"),
            (StringCase.PASCAL, "UiTealLight"),
            (StringCase.KEBAB, "ui-teal-light"),
            (StringCase.SNAKE, "ui_teal_light"),
            (StringCase.CONSTANT, "UI_TEAL_LIGHT"),
        ],
    )
    def test_change_case(self, style, expected):
        """Each style rejoins words its own way."""
        assert change_case("UI teal / light", style) == expected

    def test_digit_led_words_stay_separate(self):
        """Digit-led words after the first get an underscore in camelCase."""
        assert change_case("primary 2", StringCase.CAMEL) == "primary_2"

    def test_code_safe_prefixes_digits(self):
        """Names starting with a digit get a leading underscore."""
        assert code_safe_variable_name("50", StringCase.CAMEL) == "_50"
        assert code_safe_variable_name("2xl", StringCase.KEBAB) == "_2xl"

    def test_code_safe_empty(self):
        """Labels without alphanumerics normalise to empty."""
        assert code_safe_variable_name(" / ", StringCase.CAMEL) == ""

    def test_strip_leading_underscore(self):
        """Only a single leading underscore is removed."""
        assert strip_leading_underscore("_50") == "50"
        assert strip_leading_underscore("__x") == "_x"
        assert strip_leading_underscore("plain") == "plain"


class TestNameResolver:
    """Tests for NameResolver."""

    def test_resolves_camel_case(self):
        """Token names are case-styled."""
        resolver = NameResolver()
        token = make_token("t1", "Primary Blue", "#00F")
        assert resolver.resolve_name(token, StringCase.CAMEL) == "primaryBlue"

    def test_leading_underscore_stripped(self):
        """Numeric names are emitted without the code-safe underscore."""
        resolver = NameResolver()
        token = make_token("t1", "50", "#00F")
        assert resolver.resolve_name(token, StringCase.CAMEL, ["uiTeal"]) == "50"

    def test_same_token_same_name(self):
        """Resolving one token twice returns the cached name."""
        resolver = NameResolver()
        token = make_token("t1", "Primary", "#00F")
        first = resolver.resolve_name(token, StringCase.CAMEL, ["colors"])
        second = resolver.resolve_name(token, StringCase.CAMEL, ["colors"])
        assert first == second == "primary"
        assert resolver.issued_count == 1

    def test_collisions_get_distinct_names(self):
        """Two tokens normalising to the same name under one path stay distinct."""
        resolver = NameResolver()
        a = make_token("a", "Primary", "#00F")
        b = make_token("b", "primary", "#F00")
        name_a = resolver.resolve_name(a, StringCase.CAMEL, ["colors"])
        name_b = resolver.resolve_name(b, StringCase.CAMEL, ["colors"])
        assert name_a == "primary"
        assert name_b != name_a
        assert name_b == "primary_2"

    def test_collision_widens_with_parent_group(self):
        """A parent group name is tried before a numeric suffix."""
        resolver = NameResolver()
        group = TokenGroup(id="g", name="Brand")
        a = make_token("a", "Primary", "#00F")
        b = make_token("b", "Primary", "#F00", parent_group_id="g")
        resolver.resolve_name(a, StringCase.CAMEL, ["colors"])
        assert resolver.resolve_name(b, StringCase.CAMEL, ["colors"], group) == "brandPrimary"

    def test_same_name_under_different_paths(self):
        """Uniqueness is per path; different paths may share a leaf name."""
        resolver = NameResolver()
        a = make_token("a", "Primary", "#00F")
        b = make_token("b", "Primary", "#F00")
        assert resolver.resolve_name(a, StringCase.CAMEL, ["light"]) == "primary"
        assert resolver.resolve_name(b, StringCase.CAMEL, ["dark"]) == "primary"

    def test_no_duplicates_for_many_collisions(self):
        """Many colliding tokens all receive unique names."""
        resolver = NameResolver()
        tokens = [make_token(f"t{i}", "Primary", "#00F") for i in range(25)]
        names = [resolver.resolve_name(t, StringCase.CAMEL, ["colors"]) for t in tokens]
        assert len(set(names)) == len(names)

    def test_deterministic_across_runs(self):
        """Same inputs in the same order give the same names."""
        tokens = [make_token(f"t{i}", "Primary", "#00F") for i in range(5)]

        def run() -> list[str]:
            resolver = NameResolver()
            return [resolver.resolve_name(t, StringCase.KEBAB, ["c"]) for t in tokens]

        assert run() == run()

    def test_reset_forgets_names(self):
        """After reset a colliding name is free again."""
        resolver = NameResolver()
        a = make_token("a", "Primary", "#00F")
        b = make_token("b", "Primary", "#F00")
        resolver.resolve_name(a, StringCase.CAMEL)
        resolver.reset()
        assert resolver.issued_count == 0
        assert resolver.resolve_name(b, StringCase.CAMEL) == "primary"

    def test_peek_does_not_claim(self):
        """Peeking a name leaves the slot free for the token itself."""
        resolver = NameResolver()
        a = make_token("a", "Primary", "#00F")
        assert resolver.peek_name(a, StringCase.CAMEL) == "primary"
        assert resolver.issued_count == 0

    def test_peek_returns_issued_name(self):
        """Peeking an already named token returns its issued name."""
        resolver = NameResolver()
        a = make_token("a", "Primary", "#00F")
        b = make_token("b", "Primary", "#F00")
        resolver.resolve_name(a, StringCase.CAMEL)
        resolver.resolve_name(b, StringCase.CAMEL)
        assert resolver.peek_name(b, StringCase.CAMEL) == "primary_2"

    def test_empty_name_falls_back_to_id(self):
        """A name with no usable characters uses the token id."""
        resolver = NameResolver()
        token = make_token("token-id", "***", "#00F")
        assert resolver.resolve_name(token, StringCase.CAMEL) == "tokenId"

    def test_exhausted_suffixes_raise(self, monkeypatch):
        """Running out of suffixes is reported, never silently overwritten."""
        monkeypatch.setattr(resolver_module, "MAX_SUFFIX", 3)
        resolver = NameResolver()
        tokens = [make_token(f"t{i}", "Primary", "#00F") for i in range(3)]
        resolver.resolve_name(tokens[0], StringCase.CAMEL)
        resolver.resolve_name(tokens[1], StringCase.CAMEL)
        with pytest.raises(NameCollisionError):
            resolver.resolve_name(tokens[2], StringCase.CAMEL)
