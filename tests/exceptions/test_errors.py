"""
Tests for the cmdtree exception hierarchy and messages.
"""

from cmdtree.exceptions import (
    BindError,
    BindErrorReason,
    CmdTreeError,
    ConfigurationError,
    DuplicateCommandError,
    EmptyCommandPathError,
    EmptyInputError,
    MissingHandlerError,
    ParseError,
    UnknownCommandError,
)


class TestHierarchy:
    """Tests for exception base classes."""

    def test_parse_errors(self):
        for error in [
            EmptyInputError(),
            UnknownCommandError("x"),
            BindError("f", "f", "x", BindErrorReason.INVALID_INT),
        ]:
            assert isinstance(error, ParseError)
            assert isinstance(error, CmdTreeError)
            assert not isinstance(error, ConfigurationError)

    def test_configuration_errors(self):
        for error in [
            EmptyCommandPathError(""),
            DuplicateCommandError("stats", "Stats"),
            MissingHandlerError(["Stats"]),
        ]:
            assert isinstance(error, ConfigurationError)
            assert not isinstance(error, ParseError)


class TestMessages:
    """Tests for exception messages and attributes."""

    def test_empty_input(self):
        assert str(EmptyInputError()) == "empty input"

    def test_unknown_command(self):
        error = UnknownCommandError("frobnicate now")
        assert error.line == "frobnicate now"
        assert str(error) == "unknown command: frobnicate now"

    def test_bind_error(self):
        error = BindError("from_", "from", "x", BindErrorReason.INVALID_BOOL)
        assert error.field == "from_"
        assert str(error) == "invalid bool for from: 'x'"

    def test_duplicate_command(self):
        error = DuplicateCommandError("s3 add", "S3Add")
        assert "s3 add" in str(error)
        assert "S3Add" in str(error)

    def test_empty_path(self):
        assert EmptyCommandPathError("  ").path == "  "

    def test_missing_handler(self):
        error = MissingHandlerError(["Head", "Query"])
        assert str(error) == "No handler for command shapes: Head, Query"
