"""
Tests for name validation and normalization.

Tests cover:
1. Canonical normalization (case, width)
2. Idempotence
3. TooShort and SpecialCharacters rejection
4. Non-raising check_name
"""

import pytest

from ens_registrar.core import (
    InvalidName,
    SpecialCharacters,
    TooShort,
    check_name,
    normalize_name,
    prepare_name,
    validate_name,
)


# =============================================================================
# Normalization Tests
# =============================================================================


class TestNormalize:
    """Tests for normalize_name."""

    def test_case_variants_normalize_equal(self):
        """Names differing only by case share one canonical form."""
        assert normalize_name("FOOBarbaz") == normalize_name("foobarbaz") == "foobarbaz"

    @pytest.mark.parametrize("name", ["foobarbaz", "thisnameisopen", "abc-1234", "0123456789"])
    def test_upper_case_variant(self, name):
        """normalize(n) == normalize(upper(n))."""
        assert normalize_name(name.upper()) == normalize_name(name)

    def test_fullwidth_letters_fold_to_ascii(self):
        """Visually equivalent full-width letters map to ASCII."""
        assert normalize_name("ＦＯＯＢａｒｂａｚ") == "foobarbaz"

    @pytest.mark.parametrize("name", ["FOOBarbaz", "ＦＯＯＢａｒｂａｚ", "thisnameisopen", "Abc-Def-9"])
    def test_idempotent(self, name):
        """Normalizing twice changes nothing."""
        once = normalize_name(name)
        assert normalize_name(once) == once

    def test_non_string_rejected(self):
        """Only strings are names."""
        with pytest.raises(SpecialCharacters):
            normalize_name(b"foobarbaz")


# =============================================================================
# Validation Tests
# =============================================================================


class TestValidate:
    """Tests for validate_name."""

    def test_valid_name(self):
        """A plain lower-case name of sufficient length passes."""
        validate_name("foobarbaz")

    def test_too_short(self):
        """Names below the minimum length are rejected."""
        with pytest.raises(TooShort) as exc_info:
            validate_name("foo")
        assert exc_info.value.length == 3
        assert exc_info.value.min_length == 7

    def test_too_short_is_invalid_name(self):
        """TooShort is an InvalidName and a ValueError."""
        with pytest.raises(InvalidName):
            validate_name("foo")
        with pytest.raises(ValueError):
            validate_name("foo")

    def test_empty_name_too_short(self):
        with pytest.raises(TooShort):
            validate_name("")

    def test_min_length_is_configurable(self):
        """The threshold is a parameter, not a constant in the logic."""
        validate_name("foo", min_length=3)
        with pytest.raises(TooShort):
            validate_name("foobarbaz", min_length=10)

    def test_length_measured_on_canonical_form(self):
        """Full-width input counts canonical characters."""
        validate_name("ＦＯＯＢａｒｂａｚ")

    def test_special_characters(self):
        """Non-ASCII letters are rejected."""
        with pytest.raises(SpecialCharacters):
            validate_name("fooøøôôóOOOo")

    @pytest.mark.parametrize("name", [
        "foobar\x00baz",       # control character
        "foobarbaze\u0301",   # combining acute accent
        "foobar\u200bbaz",    # zero-width space (format)
        "foo barbaz",          # space
        "foo_barbaz",          # underscore
        "foo.barbaz",          # label separator
        "straße-name",         # sharp s, no ASCII mapping
    ])
    def test_rejected_code_points(self, name):
        with pytest.raises(SpecialCharacters):
            validate_name(name)

    def test_characters_checked_before_length(self):
        """A short name with special characters reports SpecialCharacters."""
        with pytest.raises(SpecialCharacters):
            validate_name("fø")

    def test_non_string_rejected(self):
        with pytest.raises(SpecialCharacters):
            validate_name(1234567)

    def test_length_check_can_be_skipped(self):
        """Invalidation targets short names, so length can be waived."""
        validate_name("foo", check_length=False)
        with pytest.raises(SpecialCharacters):
            validate_name("fø", check_length=False)


class TestPrepareName:
    """Tests for the validate-then-normalize pipeline."""

    def test_returns_canonical_form(self):
        assert prepare_name("FOOBarbaz") == "foobarbaz"

    def test_invalid_name_raises(self):
        with pytest.raises(TooShort):
            prepare_name("FOO")


class TestCheckName:
    """Tests for the non-raising validator."""

    def test_valid(self):
        assert check_name("foobarbaz") == (True, "")

    def test_too_short(self):
        valid, err = check_name("foo")
        assert not valid
        assert "too short" in err

    def test_special_characters(self):
        valid, err = check_name("fooøøôôóOOOo")
        assert not valid
        assert "special character" in err
