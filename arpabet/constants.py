"""Enumerations of every phoneme and the token -> Phoneme symbol table."""

from types import MappingProxyType
from typing import Mapping

from arpabet.extensions import Punctuation
from arpabet.phoneme import STRESS_ORDER, Consonant, Phoneme, Vowel, VowelSound

ALL_CONSONANTS: tuple[Consonant, ...] = tuple(Consonant)

ALL_VOWELS: tuple[Vowel, ...] = tuple(
    Vowel(sound=sound, stress=stress) for sound in VowelSound for stress in STRESS_ORDER
)

ALL_PUNCTUATION: tuple[Punctuation, ...] = tuple(Punctuation)


def _build_phoneme_map() -> Mapping[str, Phoneme]:
    phonemes = [Phoneme(value=consonant) for consonant in ALL_CONSONANTS]
    phonemes += [Phoneme(value=vowel) for vowel in ALL_VOWELS]
    return MappingProxyType({phoneme.to_str(): phoneme for phoneme in phonemes})


PHONEME_MAP: Mapping[str, Phoneme] = _build_phoneme_map()
