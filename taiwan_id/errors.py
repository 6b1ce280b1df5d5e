from __future__ import annotations
from typing import Any, Optional


class TaiwanIdError(ValueError):
    """Base class for caller errors raised by taiwan_id."""


class InvalidLetter(TaiwanIdError):
    def __init__(self, letter: Any):
        self.letter = letter
        super().__init__(f"not an ID letter (expected A-Z): {letter!r}")


class InvalidPrefix(TaiwanIdError):
    """
    The prefix can never start a valid ID.
    reason: not_a_string | too_long | invalid_letter | invalid_gender_digit
    """

    def __init__(self, prefix: Any, reason: str, detail: Optional[str] = None):
        self.prefix = prefix
        self.reason = reason
        msg = f"invalid prefix {prefix!r}: {reason}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)
