"""Unit tests for word modifiers and modifier name resolution."""

import pytest

from keyla.composition.modifiers import (
    add_prefix,
    available_modifiers,
    capitalize,
    is_valid_modifier,
    limit,
    lowercase,
    no_spaces,
    only_of_type,
    resolve_modifier,
    resolve_modifiers,
    reverse,
    trim,
    uppercase,
    validate_modifier_names,
)
from keyla.core.errors import InvalidModifier


class TestStringModifiers:
    """Test built-in string modifiers."""

    def test_uppercase(self) -> None:
        """When applied, every word is upper-cased."""
        assert uppercase()(["Hello", "world"]) == ["HELLO", "WORLD"]

    def test_lowercase(self) -> None:
        """When applied, every word is lower-cased."""
        assert lowercase()(["Hello", "WORLD"]) == ["hello", "world"]

    def test_reverse(self) -> None:
        """When applied, characters of each word are reversed."""
        assert reverse()(["abc", "xy"]) == ["cba", "yx"]

    def test_capitalize_only_touches_first_letter(self) -> None:
        """When applied, only the first character changes case."""
        assert capitalize()(["hello", "wORLD", ""]) == ["Hello", "WORLD", ""]

    def test_trim(self) -> None:
        """When applied, surrounding whitespace is removed."""
        assert trim()(["  a ", "b\t"]) == ["a", "b"]

    def test_no_spaces_removes_inner_whitespace(self) -> None:
        """When applied, whitespace inside words is removed."""
        assert no_spaces()(["a b\tc", " d "]) == ["abc", "d"]

    def test_limit_truncates_long_words(self) -> None:
        """When applied, words longer than the limit are cut."""
        assert limit(3)(["abcdef", "ab"]) == ["abc", "ab"]

    def test_limit_rejects_negative_length(self) -> None:
        """When length is negative, construction fails."""
        with pytest.raises(ValueError):
            limit(-1)

    def test_drops_none_and_stringifies_others(self) -> None:
        """When elements are not strings, None is dropped and others are stringified."""
        assert uppercase()(["a", None, 3]) == ["A", "3"]

    def test_preserves_length_for_strings(self) -> None:
        """When every element is a string, output has the same length."""
        words = ["x", "", "y z"]
        assert len(add_prefix(">")(words)) == len(words)


class TestOnlyOfType:
    """Test the pass-through type filter."""

    def test_keeps_only_strings(self) -> None:
        """When filtering for str, other elements are dropped."""
        assert only_of_type(str)(["a", 1, None, "b"]) == ["a", "b"]

    def test_is_named_identity(self) -> None:
        """When created, the filter reports the identity name."""
        assert only_of_type().name == "identity"


class TestModifierNames:
    """Test request-level modifier names."""

    def test_available_names_include_aliases(self) -> None:
        """When listing names, both whitespace removal aliases are present."""
        assert {"removeSpaces", "noSpaces"} <= available_modifiers()

    def test_available_names_show_required_arguments(self) -> None:
        """When listing names, modifiers taking an argument show its placeholder."""
        assert {"addPrefix:<text>", "addSuffix:<text>", "limit:<n>"} <= available_modifiers()

    def test_bare_argument_names_not_listed(self) -> None:
        """When listing names, no bare name is listed that would be rejected."""
        assert "addPrefix" not in available_modifiers()

    def test_bare_argument_modifier_message_shows_syntax(self) -> None:
        """When addPrefix is given without argument, the message shows the argument syntax."""
        with pytest.raises(InvalidModifier, match="addPrefix:<text>"):
            resolve_modifier("addPrefix")

    def test_alias_resolves_to_canonical_name(self) -> None:
        """When resolving noSpaces, the modifier reports removeSpaces."""
        assert resolve_modifier("noSpaces").name == "removeSpaces"

    def test_suffix_argument_after_colon(self) -> None:
        """When addSuffix carries an argument, it is appended to each word."""
        assert resolve_modifier("addSuffix:!")(["hi"]) == ["hi!"]

    def test_prefix_argument_may_contain_colon(self) -> None:
        """When the argument contains a colon, everything after the first one is kept."""
        assert resolve_modifier("addPrefix:a:b")(["c"]) == ["a:bc"]

    def test_limit_argument(self) -> None:
        """When limit carries a number, words are truncated to it."""
        assert resolve_modifier("limit:2")(["hello"]) == ["he"]

    @pytest.mark.parametrize("name", ["limit:x", "limit", "addPrefix", "uppercase:1", "shout"])
    def test_rejects_malformed_names(self, name: str) -> None:
        """When a name is unknown or its argument is malformed, it is invalid."""
        assert not is_valid_modifier(name)

    def test_invalid_name_raises_with_message(self) -> None:
        """When a name is unknown, the message names it."""
        with pytest.raises(InvalidModifier, match="Invalid modifier: 'shout'"):
            resolve_modifier("shout")

    def test_validation_reports_full_set(self) -> None:
        """When validation fails, the error carries every valid name."""
        with pytest.raises(InvalidModifier) as exc_info:
            validate_modifier_names(["uppercase", "shout"])
        assert exc_info.value.available == sorted(available_modifiers())

    def test_resolve_chain_keeps_order(self) -> None:
        """When resolving a chain, modifiers keep the requested order."""
        names = [m.name for m in resolve_modifiers(["reverse", "uppercase", "limit:3"])]
        assert names == ["reverse", "uppercase", "limit"]

    def test_resolve_chain_rejects_any_invalid_name(self) -> None:
        """When one name in the chain is invalid, nothing is resolved."""
        with pytest.raises(InvalidModifier):
            resolve_modifiers(["uppercase", "shout"])
