"""Reader for dictionaries in the CMUdict text format.

Each entry is a word followed by whitespace and its space-separated phonemes:

    ABBREVIATE  AH0 B R IY1 V IY0 EY2 T

Lines starting with ';;;' are comments, blank lines are skipped, and a
trailing '# ...' comment after an entry is ignored. Words are lowercased and
phoneme tokens uppercased, so `Test  t eh1 s t` is the entry "test".

Any line that cannot be read stops the whole load with an InvalidFormat error
carrying the 1-based line number and the text of that line.
"""

import os
import re
from typing import Iterable, Optional

from loguru import logger

from arpabet.constants import PHONEME_MAP
from arpabet.dictionary import Arpabet
from arpabet.exceptions import EmptyFile, InvalidFormat, IoFailure
from arpabet.phoneme import Polyphone, Word

# WORD, whitespace, then phonemes starting with a non-space character
ENTRY_RE = re.compile(r"^([\w\-().']+)\s+(\S.*?)\s*$")
COMMENT_RE = re.compile(r"^;;;(\s|$)")
TRAILING_COMMENT_RE = re.compile(r"\s+#.*$")


def parse_line(line: str, line_number: int) -> Optional[tuple[Word, Polyphone]]:
    """Parse one line of a dictionary.

    Returns None for comment and blank lines.

    >>> word, polyphone = parse_line("Test  t eh1 s t", 1)
    >>> word, [str(p) for p in polyphone]
    ('test', ['T', 'EH1', 'S', 'T'])
    >>> parse_line(";;; a comment", 1) is None
    True

    Raises:
        InvalidFormat: the line is not a valid entry
    """
    line = line.rstrip("\r\n")
    if COMMENT_RE.match(line) or not line.strip():
        return None

    match = ENTRY_RE.match(TRAILING_COMMENT_RE.sub("", line))
    if match is None:
        raise InvalidFormat(line_number, line)

    word = match[1].lower()
    tokens = [token.upper() for token in match[2].split(" ")]

    polyphone = []
    for token in tokens:
        phoneme = PHONEME_MAP.get(token)
        if phoneme is None:
            raise InvalidFormat(line_number, line)
        polyphone.append(phoneme)
    return word, polyphone


def parse_lines(lines: Iterable[str]) -> dict[Word, Polyphone]:
    """Parse dictionary lines into a word -> polyphone map.

    A word that appears more than once keeps its last pronunciation.

    Raises:
        InvalidFormat: a line is not a valid entry
        EmptyFile: there were no entries at all
    """
    dictionary: dict[Word, Polyphone] = {}
    n_replaced = 0
    for line_number, line in enumerate(lines, start=1):
        entry = parse_line(line, line_number)
        if entry is None:
            continue
        word, polyphone = entry
        if word in dictionary:
            n_replaced += 1
        dictionary[word] = polyphone

    if not dictionary:
        raise EmptyFile()
    if n_replaced:
        logger.debug(f"{n_replaced} duplicate words were replaced by later entries")
    return dictionary


def load_from_lines(lines: Iterable[str]) -> Arpabet:
    return Arpabet.from_map(parse_lines(lines))


def load_from_text(text: str) -> Arpabet:
    """Load a dictionary from a string in the CMUdict format.

    >>> arpabet = load_from_text("DOCTOR  D AA1 K T ER0\\nMARIO  M AA1 R IY0 OW0")
    >>> arpabet.get_polyphone_str("mario")
    ['M', 'AA1', 'R', 'IY0', 'OW0']
    """
    return load_from_lines(text.split("\n"))


def load_from_file(path: str | os.PathLike, encoding: str = "utf-8") -> Arpabet:
    """Load a dictionary from a file in the CMUdict format.

    Args:
        path: the dictionary file
        encoding: the file's text encoding; the original cmudict-0.7b
            release is latin-1

    Raises:
        IoFailure: the file could not be opened or read
        InvalidFormat: a line is not a valid entry
        EmptyFile: the file has no entries
    """
    try:
        with open(path, "r", encoding=encoding, newline="\n") as f:
            dictionary = parse_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        raise IoFailure(e) from e
    logger.info(f"Loaded {len(dictionary)} entries from {path}")
    return Arpabet.from_map(dictionary)
