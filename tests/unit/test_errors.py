"""Tests for error formatting."""

from tincture.core.errors import (
    ConfigurationError,
    ContrastError,
    ErrorContext,
    InvalidProperty,
    NotFound,
    TinctureError,
    make_not_found,
)


class TestErrorContext:
    def test_empty(self):
        assert ErrorContext().format() == ""

    def test_full(self):
        context = ErrorContext(name="o-example/brand", usecase="o-example/stripe", property="text")
        assert context.format() == (
            "usecase 'o-example/stripe' property 'text' color 'o-example/brand'"
        )


class TestErrors:
    def test_message_without_context(self):
        assert str(TinctureError("boom")) == "boom"

    def test_message_with_context(self):
        error = ConfigurationError("bad value", ErrorContext(name="o-example/brand"))
        assert str(error) == "color 'o-example/brand': bad value"
        assert error.message == "bad value"

    def test_hierarchy(self):
        assert issubclass(InvalidProperty, ConfigurationError)
        assert issubclass(NotFound, KeyError)
        assert issubclass(ContrastError, TinctureError)

    def test_make_not_found(self):
        error = make_not_found("usecase does not exist", usecase="o-example/missing")
        assert isinstance(error, NotFound)
        assert str(error) == "usecase 'o-example/missing': usecase does not exist"
        assert make_not_found("gone").context is None

    def test_contrast_error_keeps_ratio(self):
        error = ContrastError("too low", ratio=1.2)
        assert error.ratio == 1.2
        assert str(error) == "too low"
