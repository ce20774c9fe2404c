"""Tokens that are not part of ARPABET, and small integer codes for every token.

The codes are meant as numeric model inputs:
consonants are 1-31 in declaration order, vowels 101-176 (four stress
variants per vowel sound), punctuation 201-209 and the end token 254.

>>> token_to_code(Phoneme.from_token("AA1"))
103
>>> token_to_code(Punctuation.Period)
204
>>> token_to_str(code_to_token(254))
'[end]'
"""

from enum import Enum
from typing import Iterable, Union

from arpabet.phoneme import (
    STRESS_ORDER,
    Consonant,
    Phoneme,
    Vowel,
    VowelSound,
    VowelStress,
)


class Punctuation(Enum):
    StartToken = "[start]"  # beginning of an utterance
    Space = "[space]"  # between words
    Comma = "[comma]"  # comma or short breath
    Period = "[period]"
    Question = "[question]"
    Exclamation = "[exclamation]"
    Interjection = "[interjection]"  # dash, parenthetical, etc.
    Quote = "[quote]"  # opening and closing quotes are not distinguished
    Ellipsis = "[ellipsis]"
    EndToken = "[end]"  # end of an utterance

    def to_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


SentenceToken = Union[Phoneme, Punctuation]

CONSONANT_OFFSET = 1
VOWEL_OFFSET = 101
PUNCTUATION_OFFSET = 201
END_TOKEN_CODE = 254

_CONSONANT_CODES: dict[Consonant, int] = {
    consonant: CONSONANT_OFFSET + i for i, consonant in enumerate(Consonant)
}
_VOWEL_CODES: dict[tuple[VowelSound, VowelStress], int] = {
    (sound, stress): VOWEL_OFFSET + i * len(STRESS_ORDER) + j
    for i, sound in enumerate(VowelSound)
    for j, stress in enumerate(STRESS_ORDER)
}
_PUNCTUATION_CODES: dict[Punctuation, int] = {
    punctuation: (
        END_TOKEN_CODE
        if punctuation is Punctuation.EndToken
        else PUNCTUATION_OFFSET + i
    )
    for i, punctuation in enumerate(Punctuation)
}


def token_to_str(token: SentenceToken) -> str:
    return token.to_str()


def token_to_code(token: SentenceToken) -> int:
    """Map a phoneme or punctuation token to its integer code"""
    if isinstance(token, Punctuation):
        return _PUNCTUATION_CODES[token]
    if isinstance(token.value, Vowel):
        return _VOWEL_CODES[(token.value.sound, token.value.stress)]
    return _CONSONANT_CODES[token.value]


def _build_code_lookup() -> dict[int, SentenceToken]:
    lookup: dict[int, SentenceToken] = {}
    for consonant, code in _CONSONANT_CODES.items():
        lookup[code] = Phoneme(value=consonant)
    for (sound, stress), code in _VOWEL_CODES.items():
        lookup[code] = Phoneme(value=Vowel(sound=sound, stress=stress))
    for punctuation, code in _PUNCTUATION_CODES.items():
        lookup[code] = punctuation
    return lookup


_CODE_TO_TOKEN = _build_code_lookup()


def code_to_token(code: int) -> SentenceToken:
    """Reverse of token_to_code

    Raises:
        KeyError: no token has this code
    """
    return _CODE_TO_TOKEN[code]


def encode_polyphone(polyphone: Iterable[Phoneme]) -> list[int]:
    """
    >>> encode_polyphone([Phoneme.from_token(t) for t in ("B", "OY1")])
    [1, 163]
    """
    return [token_to_code(phoneme) for phoneme in polyphone]
