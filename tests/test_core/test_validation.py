"""Tests for structured validation results."""

from prospect.core.validation import ValidationResult


class TestValidationResult:
    """ValidationResult keeps the boolean fast path and explains failures."""

    def test_empty_is_truthy(self):
        result = ValidationResult()
        assert result
        assert result.is_valid

    def test_errors_make_it_falsy(self):
        result = ValidationResult()
        result.check(False, "bad")
        assert not result
        assert result.errors == ["bad"]

    def test_passing_check_records_nothing(self):
        result = ValidationResult()
        result.check(True, "never")
        assert result.errors == []

    def test_merge_prefixes_field_path(self):
        inner = ValidationResult()
        inner.add("true_value: 0 outside [1, 100]")
        outer = ValidationResult()
        outer.merge(inner, prefix="skills.accuracy")
        assert outer.errors == ["skills.accuracy.true_value: 0 outside [1, 100]"]

    def test_check_range(self):
        result = ValidationResult()
        result.check_range("age", 25, 18, 45)
        assert result

        result.check_range("age", 50, 18, 45)
        assert result.errors == ["age: 50 outside [18, 45]"]

    def test_check_range_rejects_non_numbers(self):
        result = ValidationResult()
        result.check_range("age", "25", 18, 45)
        result.check_range("flag", True, 0, 1)
        assert len(result.errors) == 2
