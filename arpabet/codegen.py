"""Precompute a dictionary into a table that loads without re-parsing.

`arpabet compile` parses the bundled CMUdict once and writes the result as
JSON, `{word: [token, ...]}`. When that table is shipped inside the package
(see arpabet.builtin.PREBUILT_TABLE_PATH), the built-in dictionary is
materialised from it with Arpabet.from_prebuilt_table() instead of parsing
the dictionary text.
"""

import json
import os

from loguru import logger

from arpabet.dictionary import Arpabet
from arpabet.exceptions import IoFailure
from arpabet.phoneme import Phoneme, Word

PrebuiltTable = dict[Word, tuple[Phoneme, ...]]


def generate_table(arpabet: Arpabet) -> dict[Word, list[str]]:
    """
    >>> from arpabet.parser import load_from_text
    >>> generate_table(load_from_text("BOY  B OY1"))
    {'boy': ['B', 'OY1']}
    """
    return {
        word: [phoneme.to_str() for phoneme in arpabet._dictionary[word]]
        for word in sorted(arpabet.keys())
    }


def write_table(arpabet: Arpabet, path: str | os.PathLike) -> None:
    table = generate_table(arpabet)
    try:
        with open(path, "w", encoding="utf8") as f:
            json.dump(table, f, ensure_ascii=False, separators=(",", ":"))
    except OSError as e:
        raise IoFailure(e) from e
    logger.info(f"Wrote a table of {len(table)} entries to {path}")


def read_table(path: str | os.PathLike) -> PrebuiltTable:
    """Read a table written by write_table, resolving every token to a Phoneme.

    Raises:
        IoFailure: the file could not be read or is not a JSON table
        StringParseError: the table contains an unknown phoneme token
    """
    try:
        with open(path, "r", encoding="utf8") as f:
            raw_table = json.load(f)
    except (OSError, ValueError) as e:
        raise IoFailure(e) from e
    if not isinstance(raw_table, dict):
        raise IoFailure(ValueError(f"{path} does not contain a JSON object"))
    return {
        word: tuple(Phoneme.from_token(token) for token in tokens)
        for word, tokens in raw_table.items()
    }
