"""Actionable error hierarchy tests.

Tests that the error factory methods produce correct, structured,
recoverable errors.
"""

from __future__ import annotations

from slugforge.errors import ActionableError, ErrorType


class TestErrorFactoryMethods:
    """REQUIREMENT: Factory methods produce structured errors with embedded guidance.

    WHO: Option validation, settings loading and the CLI
    WHAT: Each factory produces the correct error_type; suggestion is always populated;
          ai_guidance and troubleshooting are present; to_dict() excludes None values
    WHY: Opaque errors halt autonomous recovery — every error must carry
         its own recovery path
    """

    def test_config_error_names_the_field(self) -> None:
        """config() embeds the offending field name so the operator knows which setting to fix."""
        err = ActionableError.config("slugify.max_length", "must be >= 0")
        assert err.error_type == ErrorType.CONFIG
        assert "slugify.max_length" in err.error

    def test_parse_error_names_the_source(self) -> None:
        """parse() names the unparseable source so the operator knows which file to open."""
        err = ActionableError.parse("config/settings.toml", "Expected ']' at line 1")
        assert err.error_type == ErrorType.PARSE
        assert "config/settings.toml" in err.error

    def test_validation_error_carries_field_in_context(self) -> None:
        """validation() records field and reason in context for callers that re-wrap it."""
        err = ActionableError.validation("max_length", "is -1 — must be >= 0")
        assert err.error_type == ErrorType.VALIDATION
        assert err.context == {"field": "max_length", "reason": "is -1 — must be >= 0"}

    def test_every_factory_populates_guidance(self) -> None:
        """Every factory fills suggestion and ai_guidance."""
        errors = [
            ActionableError.config("f", "r"),
            ActionableError.parse("s", "r"),
            ActionableError.validation("f", "r"),
            ActionableError.unexpected("svc", "op", "boom"),
        ]
        for err in errors:
            assert err.suggestion, f"{err.error_type} has no suggestion"
            assert err.ai_guidance is not None, f"{err.error_type} has no ai_guidance"

    def test_to_dict_excludes_none_values(self) -> None:
        """to_dict() omits None-valued keys so serialized output is clean for logging."""
        err = ActionableError.unexpected("svc", "op", "boom")
        d = err.to_dict()
        assert None not in d.values()
        assert "context" not in d

    def test_to_dict_uses_enum_value(self) -> None:
        """error_type is serialized as its plain string value."""
        d = ActionableError.config("f", "r").to_dict()
        assert d["error_type"] == "config"

    def test_all_factories_set_success_false(self) -> None:
        """Every factory marks success=False so callers never treat an error as a success."""
        err = ActionableError.unexpected("test", "op", "boom")
        assert err.success is False

    def test_error_is_a_real_exception(self) -> None:
        """str() of the exception is the error message, so tracebacks stay readable."""
        err = ActionableError.validation("separator", "must be a string")
        assert isinstance(err, Exception)
        assert str(err) == err.error


class TestSuggestionPreservation:
    """REQUIREMENT: Custom suggestions are always preserved.

    WHO: Callers providing operation-specific context
    WHAT: Custom suggestions flow through factory methods and from_exception()
    WHY: Callers have context that generic classifiers cannot infer
    """

    def test_validation_preserves_custom_suggestion(self) -> None:
        """A caller-provided suggestion is preserved verbatim, overriding the default."""
        err = ActionableError.validation("max_length", "is -1", suggestion="Use 0 to disable truncation")
        assert err.suggestion == "Use 0 to disable truncation"

    def test_from_exception_preserves_caller_suggestion(self) -> None:
        """from_exception() forwards the caller's suggestion rather than generating one."""
        err = ActionableError.from_exception(
            RuntimeError("boom"), "cli", "slug", suggestion="Re-run with --verbose"
        )
        assert err.suggestion == "Re-run with --verbose"


class TestFromException:
    """REQUIREMENT: Foreign exceptions are classified into a recovery path.

    WHO: The CLI wrapping stdin reads and other stdlib calls
    WHAT: Decode failures become PARSE; TypeError/ValueError become VALIDATION;
          anything else is UNEXPECTED; an ActionableError passes through unchanged
    WHY: Misclassifying a bad input as an unexpected crash sends the operator
         to the logs instead of to their input
    """

    def test_unicode_decode_error_is_parse(self) -> None:
        """Undecodable input is a PARSE error."""
        exc = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        err = ActionableError.from_exception(exc, "stdin", "read_input")
        assert err.error_type == ErrorType.PARSE

    def test_value_error_is_validation(self) -> None:
        """A ValueError becomes a VALIDATION error naming the operation."""
        err = ActionableError.from_exception(ValueError("bad level"), "logging", "parse_level")
        assert err.error_type == ErrorType.VALIDATION
        assert "parse_level" in err.error

    def test_other_errors_are_unexpected(self) -> None:
        """An unclassifiable exception is UNEXPECTED."""
        err = ActionableError.from_exception(RuntimeError("boom"), "cli", "slug")
        assert err.error_type == ErrorType.UNEXPECTED

    def test_actionable_error_passes_through(self) -> None:
        """An already-actionable error is returned as-is, not re-wrapped."""
        original = ActionableError.config("f", "r")
        assert ActionableError.from_exception(original, "cli", "slug") is original
