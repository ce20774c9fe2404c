from typing import Iterable, Iterator, Mapping, Optional, Sequence

from arpabet.exceptions import ReadOnlyDictionaryError
from arpabet.phoneme import Phoneme, Polyphone, Word


class Arpabet:
    """A pronouncing dictionary mapping lowercase words to polyphones.

    Lookups are exact and case-sensitive: keys are lowercased when a
    dictionary is parsed, so callers wanting case-insensitive lookups must
    lowercase the query word themselves.

    Polyphones are copied on the way in and on the way out, so nothing
    returned by a lookup can change the dictionary.

    >>> arpabet = Arpabet()
    >>> arpabet.insert("test", [Phoneme.from_token(t) for t in "T EH1 S T".split()])
    >>> arpabet.get_polyphone_str("test")
    ['T', 'EH1', 'S', 'T']
    >>> arpabet.get_polyphone_str("Test") is None
    True
    """

    def __init__(self):
        self._dictionary: dict[Word, Polyphone] = {}

    @classmethod
    def from_map(cls, dictionary: dict[Word, Polyphone]) -> "Arpabet":
        """Wrap an already built map, without validation or copying"""
        arpabet = cls()
        arpabet._dictionary = dictionary
        return arpabet

    @classmethod
    def from_prebuilt_table(
        cls, table: Mapping[Word, Sequence[Phoneme]]
    ) -> "Arpabet":
        """Copy a precomputed word -> phonemes table (see arpabet.codegen)
        into a new, independently mutable dictionary"""
        return cls.from_map({word: list(phonemes) for word, phonemes in table.items()})

    def get_polyphone(self, word: str) -> Optional[Polyphone]:
        polyphone = self._dictionary.get(word)
        if polyphone is None:
            return None
        return list(polyphone)

    def get_polyphone_str(self, word: str) -> Optional[list[str]]:
        polyphone = self._dictionary.get(word)
        if polyphone is None:
            return None
        return [phoneme.to_str() for phoneme in polyphone]

    def insert(self, word: Word, polyphone: Iterable[Phoneme]) -> Optional[Polyphone]:
        """Add or replace an entry and return the polyphone it replaced, if any"""
        previous = self._dictionary.get(word)
        self._dictionary[word] = list(polyphone)
        return previous

    def remove(self, word: str) -> Optional[Polyphone]:
        """Remove an entry and return its polyphone; removing a missing word does nothing"""
        return self._dictionary.pop(word, None)

    def combine(self, other: "Arpabet") -> "Arpabet":
        """Return a new dictionary with the entries of both, `other` winning on conflicts"""
        combined = Arpabet()
        combined.merge_from(self)
        combined.merge_from(other)
        return combined

    def merge_from(self, other: "Arpabet") -> None:
        """Copy the entries of `other` into this dictionary, replacing existing ones"""
        for word, polyphone in other._dictionary.items():
            self._dictionary[word] = list(polyphone)

    def copy(self) -> "Arpabet":
        return Arpabet().combine(self)

    def keys(self) -> list[Word]:
        """All words, in no particular order"""
        return list(self._dictionary.keys())

    def __len__(self) -> int:
        return len(self._dictionary)

    def __contains__(self, word: object) -> bool:
        return word in self._dictionary

    def __iter__(self) -> Iterator[Word]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arpabet):
            return NotImplemented
        return self._dictionary == other._dictionary

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} entries)"


class ReadOnlyArpabet(Arpabet):
    """A dictionary shared by the whole process, such as the built-in CMUdict.

    Use copy() or combine() to get a mutable dictionary.
    """

    def insert(self, word: Word, polyphone: Iterable[Phoneme]) -> Optional[Polyphone]:
        raise ReadOnlyDictionaryError(
            f"Cannot insert '{word}' into a read-only dictionary, copy() it first."
        )

    def remove(self, word: str) -> Optional[Polyphone]:
        raise ReadOnlyDictionaryError(
            f"Cannot remove '{word}' from a read-only dictionary, copy() it first."
        )

    def merge_from(self, other: Arpabet) -> None:
        raise ReadOnlyDictionaryError(
            "Cannot merge into a read-only dictionary, copy() it first."
        )
