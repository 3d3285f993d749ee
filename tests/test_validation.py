"""Tests para las reglas de validación."""

import re

import pytest

from tuiform.validation import (
    Email,
    MaxLength,
    MinLength,
    Pattern,
    Predicate,
    Required,
    ValidationError,
)


class TestRequired:
    """Tests para Required."""

    def test_empty_fails(self):
        assert Required().validate("") == "This field is required"

    def test_whitespace_fails(self):
        assert Required().validate("   ") is not None

    def test_filled_passes(self):
        assert Required().validate(" x ") is None


class TestEmail:
    """Tests para Email."""

    def test_valid(self):
        assert Email().validate("a@b.co") is None

    def test_empty_is_valid(self):
        """Vacío es válido: la obligatoriedad es otro concepto."""
        assert Email().validate("") is None

    @pytest.mark.parametrize("value", ["a@b", "@b.co", "a@", "a@b.", "a@@b.co", "a@b@c.co", "a@.b.co", "plain"])
    def test_invalid(self, value):
        assert Email().validate(value) == "Invalid email address"

    def test_subdomain(self):
        assert Email().validate("john.doe@mail.example.com") is None


class TestLength:
    """Tests para MinLength y MaxLength."""

    def test_min_length_empty_is_valid(self):
        assert MinLength(3).validate("") is None

    def test_min_length(self):
        assert MinLength(3).validate("ab") == "Must be at least 3 characters"
        assert MinLength(3).validate("abc") is None

    def test_min_length_counts_characters(self):
        """Cuenta caracteres, no bytes."""
        assert MinLength(3).validate("ñá") is not None
        assert MinLength(2).validate("ñá") is None

    def test_max_length(self):
        assert MaxLength(3).validate("abcd") == "Must be at most 3 characters"
        assert MaxLength(3).validate("abc") is None
        assert MaxLength(3).validate("") is None

    def test_negative_length_rejected(self):
        with pytest.raises(ValueError):
            MinLength(-1)
        with pytest.raises(ValueError):
            MaxLength(-5)


class TestPattern:
    """Tests para Pattern y sus presets."""

    def test_invalid_regex_fails_at_construction(self):
        with pytest.raises(ValueError):
            Pattern("([unclosed", "bad")

    def test_compiled_pattern(self):
        rule = Pattern(re.compile(r"^\d+$"), "digits only")
        assert rule.validate("123") is None
        assert rule.validate("12a") == "digits only"

    def test_empty_is_valid(self):
        assert Pattern.zip_code().validate("") is None

    @pytest.mark.parametrize("value", ["12345", "12345-6789"])
    def test_zip_valid(self, value):
        assert Pattern.zip_code().validate(value) is None

    @pytest.mark.parametrize("value", ["1234", "123456", "12345-67", "abcde"])
    def test_zip_invalid(self, value):
        assert Pattern.zip_code().validate(value) == "Invalid ZIP code format"

    @pytest.mark.parametrize("value", ["555-123-4567", "(555) 123-4567", "+1 555 123 4567", "1234567"])
    def test_phone_valid(self, value):
        assert Pattern.phone().validate(value) is None

    def test_phone_invalid(self):
        assert Pattern.phone().validate("12-34") == "Invalid phone number format"

    def test_date(self):
        assert Pattern.date().validate("2024-01-31") is None
        assert Pattern.date().validate("2024/01/31") is not None
        assert Pattern.date().validate("24-1-1") is not None


class TestPredicate:
    """Tests para Predicate."""

    def test_true_passes(self):
        assert Predicate(lambda v: v.isupper()).validate("ABC") is None

    def test_false_uses_message(self):
        rule = Predicate(lambda v: v.isupper(), "Must be uppercase")
        assert rule.validate("abc") == "Must be uppercase"

    def test_false_default_message(self):
        assert Predicate(lambda v: False).validate("x") == "Invalid value"

    def test_string_result_is_message(self):
        assert Predicate(lambda v: "custom").validate("x") == "custom"

    def test_empty_is_valid(self):
        assert Predicate(lambda v: False).validate("") is None


class TestValidationError:
    """Tests para ValidationError."""

    def test_fields(self):
        err = ValidationError("email", "Invalid email address")
        assert err.field_id == "email"
        assert err.message == "Invalid email address"
        assert str(err) == "email: Invalid email address"
