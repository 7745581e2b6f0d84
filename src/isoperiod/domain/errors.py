"""Parse error taxonomy.

Every failure carries the complete original input so callers can reuse it
in their own diagnostics, and a kind they can branch on.
"""

from __future__ import annotations

from enum import StrEnum


class ParseErrorKind(StrEnum):
    """Why a period string was rejected."""

    EMPTY_OR_SIGN_ONLY = "empty_or_sign_only"
    MISSING_PERIOD_MARKER = "missing_period_marker"
    MISSING_FIELD_NUMBER = "missing_field_number"
    MALFORMED_FIELD_NUMBER = "malformed_field_number"
    TRAILING_TEXT = "trailing_text"
    NO_FIELDS_MATCHED = "no_fields_matched"


_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.EMPTY_OR_SIGN_ONLY: "cannot parse a blank string as a period: {text!r}",
    ParseErrorKind.MISSING_PERIOD_MARKER: "expected 'P' period mark at the start: {text}",
    ParseErrorKind.MISSING_FIELD_NUMBER: (
        "expected a number before the '{designator}' designator: {text}"
    ),
    ParseErrorKind.MALFORMED_FIELD_NUMBER: (
        "malformed number before the '{designator}' designator: {text}"
    ),
    ParseErrorKind.TRAILING_TEXT: "unexpected remaining components {remainder}: {text}",
    ParseErrorKind.NO_FIELDS_MATCHED: (
        "expected 'Y', 'M', 'W', 'D', 'H', 'M', or 'S' designator: {text}"
    ),
}


class PeriodParseError(ValueError):
    """Raised when text is not a valid ISO-8601 period.

    Attributes:
        kind: The failure category.
        text: The input exactly as supplied.
        designator: Unit marker being parsed when the failure occurred.
        remainder: Unconsumed text, for ``TRAILING_TEXT`` failures.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        text: str,
        *,
        designator: str | None = None,
        remainder: str | None = None,
    ) -> None:
        self.kind = kind
        self.text = text
        self.designator = designator
        self.remainder = remainder
        message = _MESSAGES[kind].format(text=text, designator=designator, remainder=remainder)
        super().__init__(message)
