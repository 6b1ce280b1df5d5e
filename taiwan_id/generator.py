from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import random

from .codes import LETTER_CODE, LETTERS
from .checksum import check_digit
from .config import DEFAULT_CONFIG
from .errors import InvalidPrefix

MAX_PREFIX_LEN = 2
BODY_LEN = 7

def parse_gender_digits(values: Any) -> Tuple[str, ...]:
    """
    Normalize the configured gender digits: ["1", 2, "1"] -> ("1", "2").
    Raises ValueError on an empty set or anything that is not a single digit.
    """
    if isinstance(values, (str, bytes)) or not hasattr(values, "__iter__"):
        raise ValueError(f"gender_digits must be a list of digits, got {values!r}")
    out: List[str] = []
    for v in values:
        s = str(v)
        if len(s) != 1 or s not in "0123456789":
            raise ValueError(f"gender digit must be a single digit 0-9, got {v!r}")
        if s not in out:
            out.append(s)
    if not out:
        raise ValueError("gender_digits must not be empty")
    return tuple(out)

class IdGenerator:
    """
    Random valid IDs. rng is anything with randrange(n); random.Random works.
    Draw order: letter (26), gender digit, 7 body digits.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, rng: Any = None):
        self.cfg = config if config is not None else DEFAULT_CONFIG
        gen_cfg = self.cfg.get("generation", {})
        self.gender_digits = parse_gender_digits(
            gen_cfg.get("gender_digits", DEFAULT_CONFIG["generation"]["gender_digits"]))
        self.rng = rng if rng is not None else random.Random(gen_cfg.get("seed"))
        self.logs: List[str] = []

    def generate(self) -> str:
        return self.generate_prefix("")

    def generate_prefix(self, prefix: str) -> str:
        self._check_prefix(prefix)
        if prefix:
            letter = prefix[0]
            self.logs.append(f"gen: letter={letter} source=prefix")
        else:
            letter = LETTERS[self.rng.randrange(len(LETTERS))]
            self.logs.append(f"gen: letter={letter} source=random")
        if len(prefix) == MAX_PREFIX_LEN:
            gender = prefix[1]
            self.logs.append(f"gen: gender={gender} source=prefix")
        else:
            gender = self.gender_digits[self.rng.randrange(len(self.gender_digits))]
            self.logs.append(f"gen: gender={gender} source=random")
        body = "".join(str(self.rng.randrange(10)) for _ in range(BODY_LEN))
        partial = letter + gender + body
        result = partial + str(check_digit(partial))
        self.logs.append(f"gen: id={result}")
        return result

    def generate_many(self, count: int, prefix: str = "") -> List[str]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._check_prefix(prefix)
        return [self.generate_prefix(prefix) for _ in range(count)]

    def _check_prefix(self, prefix: Any) -> None:
        if not isinstance(prefix, str):
            raise InvalidPrefix(prefix, "not_a_string")
        if len(prefix) > MAX_PREFIX_LEN:
            raise InvalidPrefix(prefix, "too_long", f"at most {MAX_PREFIX_LEN} characters")
        if prefix and prefix[0] not in LETTER_CODE:
            raise InvalidPrefix(prefix, "invalid_letter", "first character must be A-Z")
        if len(prefix) == MAX_PREFIX_LEN and prefix[1] not in self.gender_digits:
            raise InvalidPrefix(prefix, "invalid_gender_digit",
                                f"expected one of {', '.join(self.gender_digits)}")

def generate(rng: Any = None, config: Optional[Dict[str, Any]] = None) -> str:
    return IdGenerator(config, rng).generate()

def generate_prefix(prefix: str, rng: Any = None, config: Optional[Dict[str, Any]] = None) -> str:
    return IdGenerator(config, rng).generate_prefix(prefix)
