from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    INVALID_BASE = "invalid_base"
    INVALID_DIGIT = "invalid_digit"
    EMPTY_INPUT = "empty_input"
    UNKNOWN_INPUT_TYPE = "unknown_input_type"
    NUMBER_TOO_LARGE = "number_too_large"
    INPUT_TOO_LONG = "input_too_long"


@dataclass(frozen=True)
class ConversionError:
    """A recoverable conversion failure, passed back by value."""

    kind: ErrorKind
    message: str
    numeral: str | None = None


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion: either display text or an error message."""

    ok: bool
    text: str | None = None
    message: str | None = None
    kind: ErrorKind | None = None

    @classmethod
    def success(cls, text: str) -> "ConversionResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, error: ConversionError) -> "ConversionResult":
        return cls(ok=False, message=error.message, kind=error.kind)

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True, "text": self.text}
        return {
            "ok": False,
            "message": self.message,
            "kind": self.kind.value if self.kind else None,
        }
