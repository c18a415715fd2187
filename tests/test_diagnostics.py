"""Tests for the diagnostics package: templates, formatter and exceptions."""

from __future__ import annotations

import json

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from msgformatter.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    EmptyParameterNameError,
    ErrorTemplate,
    MessageFormatError,
    MissingParameterError,
    MissingPluralKeysError,
    OutputFormat,
    PluralValueError,
    SourceSpan,
)


class TestSourceSpan:
    """SourceSpan invariants."""

    def test_valid(self) -> None:
        span = SourceSpan(2, 5)
        assert (span.start, span.end) == (2, 5)

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError, match="start must be >= 0"):
            SourceSpan(-1, 3)

    def test_end_before_start(self) -> None:
        with pytest.raises(ValueError, match=r"end \(1\) must be >= start \(2\)"):
            SourceSpan(2, 1)


class TestErrorTemplate:
    """Exact message text for every error case."""

    def test_empty_parameter_name(self) -> None:
        diagnostic = ErrorTemplate.empty_parameter_name()
        assert diagnostic.code is DiagnosticCode.EMPTY_PARAMETER_NAME
        assert diagnostic.message == "Parameter's name can not be empty."

    def test_parameter_not_provided(self) -> None:
        diagnostic = ErrorTemplate.parameter_not_provided("min")
        assert diagnostic.message == "\"min\" parameter's value is missing."
        assert diagnostic.argument_name == "min"

    def test_plural_keys_missing_single(self) -> None:
        assert (
            ErrorTemplate.plural_keys_missing(("other",)).message
            == 'Missing plural key "other".'
        )

    def test_plural_keys_missing_both(self) -> None:
        assert (
            ErrorTemplate.plural_keys_missing(("one", "other")).message
            == 'Missing plural keys: "one", "other".'
        )

    def test_plural_value_not_integer(self) -> None:
        diagnostic = ErrorTemplate.plural_value_not_integer(1.5)
        assert diagnostic.message == "Only integer numbers are supported with plural format."
        assert diagnostic.received_type == "float"


class TestDiagnosticFormatter:
    """Rust, simple and JSON output."""

    def test_rust(self) -> None:
        diagnostic = ErrorTemplate.parameter_not_provided("min", SourceSpan(0, 5))
        output = DiagnosticFormatter().format(diagnostic)
        assert output.splitlines() == [
            "error[PARAMETER_NOT_PROVIDED]: \"min\" parameter's value is missing.",
            "  --> offset 0..5",
            "  = argument: min",
            "  = help: Pass 'min' in the parameters mapping",
        ]

    def test_format_error_delegates(self) -> None:
        diagnostic = ErrorTemplate.empty_parameter_name()
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)
        assert str(diagnostic) == diagnostic.message

    def test_simple(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert (
            formatter.format(ErrorTemplate.empty_parameter_name())
            == "EMPTY_PARAMETER_NAME: Parameter's name can not be empty."
        )

    def test_json(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(
            formatter.format(ErrorTemplate.plural_value_not_integer("x", "n", SourceSpan(1, 4)))
        )
        assert data["code"] == "PLURAL_VALUE_NOT_INTEGER"
        assert data["code_value"] == 2002
        assert data["argument_name"] == "n"
        assert data["received_type"] == "str"
        assert (data["start"], data["end"]) == (1, 4)

    def test_sanitize_truncates(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=5
        )
        diagnostic = Diagnostic(code=DiagnosticCode.EMPTY_PARAMETER_NAME, message="abcdefgh")
        assert formatter.format(diagnostic) == "EMPTY_PARAMETER_NAME: abcde..."

    def test_format_all(self) -> None:
        diagnostics = [ErrorTemplate.empty_parameter_name(), ErrorTemplate.empty_parameter_name()]
        assert DiagnosticFormatter().format_all(diagnostics).count("\n\n") == 1

    @given(
        code=st.sampled_from(list(DiagnosticCode)),
        message=st.text(min_size=1, max_size=100),
        output_format=st.sampled_from(list(OutputFormat)),
    )
    def test_output_names_code(
        self, code: DiagnosticCode, message: str, output_format: OutputFormat
    ) -> None:
        """PROPERTY: every output format names the diagnostic code."""
        output = DiagnosticFormatter(output_format=output_format).format(
            Diagnostic(code=code, message=message)
        )
        assert code.name in output
        event(f"format={output_format.value}")


class TestExceptions:
    """Exception hierarchy and attributes."""

    @pytest.mark.parametrize(
        "error_type",
        [EmptyParameterNameError, MissingParameterError, MissingPluralKeysError, PluralValueError],
    )
    def test_hierarchy(self, error_type: type[MessageFormatError]) -> None:
        assert issubclass(error_type, MessageFormatError)
        assert issubclass(error_type, ValueError)

    def test_str_is_plain_message(self) -> None:
        error = MissingParameterError(
            ErrorTemplate.parameter_not_provided("x"), parameter_name="x"
        )
        assert str(error) == "\"x\" parameter's value is missing."
        assert error.diagnostic is not None
        assert error.format_error().startswith("error[PARAMETER_NOT_PROVIDED]")

    def test_plain_string_message(self) -> None:
        error = MessageFormatError("boom")
        assert error.diagnostic is None
        assert error.format_error() == "boom"
