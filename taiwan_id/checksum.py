from __future__ import annotations
from typing import Any, Dict, List, Optional
import re
from dataclasses import dataclass

from .codes import LETTER_CODE, letter_code
from .errors import InvalidLetter

# Weights for [d1, d2, gender, c1..c7]. The check digit is added with weight 1.
WEIGHTS: List[int] = [1, 9, 8, 7, 6, 5, 4, 3, 2, 1]

ID_REGEX = re.compile(r'([A-Z])([0-9]{9})')
PARTIAL_REGEX = re.compile(r'([A-Z])([0-9]{8})')

@dataclass
class IdCheckResult:
    valid: bool
    reason: Optional[str] = None          # format_mismatch | invalid_letter | checksum_fail
    expected_check_digit: Optional[int] = None
    total: Optional[int] = None

def to_digits(id_no: str) -> List[int]:
    """
    Expand an ID (or a 9-char partial) into its numeric terms.
    'A123456789' -> [1, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    """
    d1, d2 = letter_code(id_no[0])
    return [d1, d2] + [int(ch) for ch in id_no[1:]]

def weighted_sum(digits: List[int]) -> int:
    total = sum(d * w for d, w in zip(digits, WEIGHTS))
    if len(digits) > len(WEIGHTS):
        total += digits[len(WEIGHTS)]
    return total

def check_digit(partial: str) -> int:
    """Check digit that makes the 9-char partial (letter + 8 digits) a valid ID."""
    if not isinstance(partial, str):
        raise ValueError(f"partial ID must be a string, got {type(partial).__name__}")
    if partial and partial[0] not in LETTER_CODE:
        raise InvalidLetter(partial[0])
    if not PARTIAL_REGEX.fullmatch(partial):
        raise ValueError(f"partial ID must be a letter followed by 8 digits: {partial!r}")
    return (10 - weighted_sum(to_digits(partial)) % 10) % 10

def check_id(candidate: Any) -> IdCheckResult:
    """
    Validate a Taiwan National ID and say why it failed.
    Never raises: anything that is not a 10-char ASCII ID is a format_mismatch.
    """
    if not isinstance(candidate, str) or len(candidate) != 10:
        return IdCheckResult(False, reason="format_mismatch")
    m = ID_REGEX.fullmatch(candidate)
    if not m:
        if candidate[0] not in LETTER_CODE and candidate[1:].isascii() and candidate[1:].isdigit():
            return IdCheckResult(False, reason="invalid_letter")
        return IdCheckResult(False, reason="format_mismatch")
    digits = to_digits(candidate)
    total = weighted_sum(digits)
    expected = (10 - weighted_sum(digits[:-1]) % 10) % 10
    if total % 10 == 0:
        return IdCheckResult(True, expected_check_digit=expected, total=total)
    return IdCheckResult(False, reason="checksum_fail", expected_check_digit=expected, total=total)

def is_valid(candidate: Any) -> bool:
    return check_id(candidate).valid

def explain(candidate: str) -> Dict[str, Any]:
    """
    Per-position breakdown of the checksum:
    - digits (11 terms), weights, products, total, valid
    """
    if not isinstance(candidate, str) or not ID_REGEX.fullmatch(candidate):
        raise ValueError(f"ID must be one uppercase letter followed by 9 digits: {candidate!r}")
    digits = to_digits(candidate)
    weights = WEIGHTS + [1]
    products = [d * w for d, w in zip(digits, weights)]
    total = sum(products)
    return {
        "id": candidate,
        "digits": digits,
        "weights": weights,
        "products": products,
        "total": total,
        "valid": total % 10 == 0,
    }
