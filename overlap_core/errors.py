"""Error taxonomy for a single analysis run.

Every error is terminal for the run and carries enough context for a host
to point the user at the offending line.
"""

from __future__ import annotations

from typing import Any


class AnalysisError(ValueError):
    """Base class for all reportable analysis failures."""

    kind = "analysis_error"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.kind, "message": str(self)}


class MalformedRow(AnalysisError):
    """A row does not split into exactly four comma-separated fields."""

    kind = "malformed_row"

    def __init__(self, line_number: int, content: str):
        self.line_number = line_number
        self.content = content
        super().__init__(f"Invalid CSV at line {line_number}: {content}")

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "line_number": self.line_number,
            "content": self.content,
        }


class InvalidInteger(AnalysisError):
    kind = "invalid_integer"

    def __init__(self, line_number: int, value: str):
        self.line_number = line_number
        self.value = value
        super().__init__(f"Invalid integer {value!r} at line {line_number}")

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "line_number": self.line_number,
            "value": self.value,
        }


class UnsupportedDateFormat(AnalysisError):
    """No known date layout matched.

    ``line_number`` is filled in by the loader; the parser itself only knows
    the text.
    """

    kind = "unsupported_date_format"

    def __init__(self, text: str, line_number: int | None = None):
        self.text = text
        self.line_number = line_number
        msg = f"Unsupported date format: {text}"
        if line_number is not None:
            msg += f" (line {line_number})"
        super().__init__(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "text": self.text,
            "line_number": self.line_number,
        }


class NoData(AnalysisError):
    kind = "no_data"

    def __init__(self, message: str = "No assignments to analyze"):
        super().__init__(message)
