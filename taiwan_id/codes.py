from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import InvalidLetter

# Official letter table: A=10, B=11, ... with I, O, W, Z moved out of sequence.
LETTER_CODE: Mapping[str, int] = MappingProxyType({
    'A':10,'B':11,'C':12,'D':13,'E':14,'F':15,'G':16,'H':17,'I':34,'J':18,
    'K':19,'L':20,'M':21,'N':22,'O':35,'P':23,'Q':24,'R':25,'S':26,'T':27,
    'U':28,'V':29,'W':32,'X':30,'Y':31,'Z':33
})

LETTERS: Tuple[str, ...] = tuple(sorted(LETTER_CODE))


def letter_code(letter: str) -> Tuple[int, int]:
    """Return the (tens, units) digits of the letter's code, e.g. 'A' -> (1, 0)."""
    if not isinstance(letter, str) or letter not in LETTER_CODE:
        raise InvalidLetter(letter)
    code = LETTER_CODE[letter]
    return code // 10, code % 10
