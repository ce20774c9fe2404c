"""arpabet: a pronouncing dictionary of ARPABET phonemes backed by CMUdict.

>>> from arpabet import load_cmudict
>>> load_cmudict().get_polyphone_str("test")
['T', 'EH1', 'S', 'T']
"""

from arpabet._version import VERSION
from arpabet.builtin import load_cmudict, load_dictionary
from arpabet.constants import ALL_CONSONANTS, ALL_PUNCTUATION, ALL_VOWELS, PHONEME_MAP
from arpabet.dictionary import Arpabet, ReadOnlyArpabet
from arpabet.exceptions import (
    ArpabetError,
    EmptyFile,
    InvalidFormat,
    IoFailure,
    ReadOnlyDictionaryError,
    StringParseError,
)
from arpabet.extensions import Punctuation, SentenceToken
from arpabet.parser import load_from_file, load_from_lines, load_from_text
from arpabet.phoneme import (
    Consonant,
    Phoneme,
    Polyphone,
    Vowel,
    VowelSound,
    VowelStress,
    Word,
)

__version__ = VERSION

__all__ = [
    "ALL_CONSONANTS",
    "ALL_PUNCTUATION",
    "ALL_VOWELS",
    "PHONEME_MAP",
    "Arpabet",
    "ArpabetError",
    "Consonant",
    "EmptyFile",
    "InvalidFormat",
    "IoFailure",
    "Phoneme",
    "Polyphone",
    "Punctuation",
    "ReadOnlyArpabet",
    "ReadOnlyDictionaryError",
    "SentenceToken",
    "StringParseError",
    "Vowel",
    "VowelSound",
    "VowelStress",
    "Word",
    "load_cmudict",
    "load_dictionary",
    "load_from_file",
    "load_from_lines",
    "load_from_text",
]
