"""Tests for exceptions.py: full coverage of exception hierarchy."""

from entity_search.core.exceptions import (
    ConfigurationError,
    DataError,
    EntitySearchError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidKindError,
    MalformedRecordError,
    ValidationError,
)


class TestEntitySearchError:
    def test_basic_creation(self):
        e = EntitySearchError("test error")
        assert str(e) == "test error"
        assert e.severity == ErrorSeverity.ERROR
        assert e.category == ErrorCategory.DATA

    def test_to_dict(self):
        ctx = ErrorContext(operation="search", suggestion="s")
        d = EntitySearchError("fail", context=ctx).to_dict()
        assert d["error"] == "fail"
        assert d["operation"] == "search"
        assert d["suggestion"] == "s"
        assert d["severity"] == "error"

    def test_to_dict_minimal(self):
        d = EntitySearchError("fail").to_dict()
        assert "operation" not in d
        assert "suggestion" not in d


class TestInvalidKindError:
    def test_hierarchy(self):
        e = InvalidKindError("planet")
        assert isinstance(e, ValidationError)
        assert isinstance(e, EntitySearchError)
        assert e.category == ErrorCategory.VALIDATION
        assert e.severity == ErrorSeverity.CRITICAL

    def test_message_and_context(self):
        e = InvalidKindError("planet", allowed=("all", "company"))
        assert "planet" in str(e)
        assert e.value == "planet"
        assert e.context.input_value == "planet"
        assert e.context.operation == "search"
        assert e.context.suggestion == "Use one of: all, company"

    def test_explicit_suggestion_kept(self):
        ctx = ErrorContext(suggestion="pick a tab")
        e = InvalidKindError(3, allowed=("all",), context=ctx)
        assert e.context.suggestion == "pick a tab"


class TestMalformedRecordError:
    def test_hierarchy(self):
        e = MalformedRecordError("company", "id")
        assert isinstance(e, DataError)
        assert e.severity == ErrorSeverity.WARNING

    def test_fields(self):
        record = {"name": "Acme"}
        e = MalformedRecordError("company", "id", record=record)
        assert e.kind == "company"
        assert e.missing == "id"
        assert e.context.input_value is record
        assert e.context.metadata == {"missing": "id"}
        assert e.context.operation == "normalize:company"
        assert str(e) == "Malformed company record: missing id"


class TestConfigurationError:
    def test_creation(self):
        e = ConfigurationError("bad config")
        assert e.category == ErrorCategory.CONFIGURATION
        assert e.severity == ErrorSeverity.CRITICAL
