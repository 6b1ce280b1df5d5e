"""Validate and generate Taiwan National Identification Card numbers."""
from .codes import LETTER_CODE, letter_code
from .checksum import IdCheckResult, check_digit, check_id, explain, is_valid
from .generator import IdGenerator, generate, generate_prefix
from .errors import InvalidLetter, InvalidPrefix, TaiwanIdError

__all__ = [
    "LETTER_CODE", "letter_code",
    "IdCheckResult", "check_digit", "check_id", "explain", "is_valid",
    "IdGenerator", "generate", "generate_prefix",
    "InvalidLetter", "InvalidPrefix", "TaiwanIdError",
]
