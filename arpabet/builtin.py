"""The built-in CMU Pronouncing Dictionary.

The dictionary text is the `cmudict.dict` file shipped with the `cmudict`
distribution. It is loaded once per process, on first use, and shared
read-only by every caller.
"""

import io
import threading
from pathlib import Path
from typing import Optional, TextIO

import cmudict
from loguru import logger

from arpabet.codegen import read_table
from arpabet.config import DictionaryConfig
from arpabet.dictionary import Arpabet, ReadOnlyArpabet
from arpabet.exceptions import IoFailure, StringParseError
from arpabet.parser import load_from_file, parse_lines

# Written by `arpabet compile`, used instead of the dictionary text when present
PREBUILT_TABLE_PATH = Path(__file__).parent / "data" / "cmudict.json"

_CMUDICT: Optional[ReadOnlyArpabet] = None
_CMUDICT_LOCK = threading.Lock()


def open_bundled_dictionary() -> TextIO:
    """Open the bundled CMUdict text for reading"""
    return io.TextIOWrapper(cmudict.dict_stream(), encoding="utf-8")


def _build_cmudict() -> ReadOnlyArpabet:
    if PREBUILT_TABLE_PATH.exists():
        try:
            table = read_table(PREBUILT_TABLE_PATH)
        except StringParseError as e:
            raise IoFailure(e) from e
        arpabet = ReadOnlyArpabet.from_prebuilt_table(table)
        source = str(PREBUILT_TABLE_PATH)
    else:
        try:
            with open_bundled_dictionary() as f:
                arpabet = ReadOnlyArpabet.from_map(parse_lines(f))
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailure(e) from e
        source = "the bundled cmudict"
    logger.info(f"Loaded {len(arpabet)} entries from {source}")
    return arpabet


def load_cmudict() -> ReadOnlyArpabet:
    """Return the shared, read-only CMUdict, loading it on the first call.

    Use `load_cmudict().copy()` to get a dictionary you can modify.

    >>> load_cmudict().get_polyphone_str("game")
    ['G', 'EY1', 'M']
    >>> load_cmudict() is load_cmudict()
    True
    """
    global _CMUDICT
    arpabet = _CMUDICT
    if arpabet is None:
        with _CMUDICT_LOCK:
            if _CMUDICT is None:
                _CMUDICT = _build_cmudict()
            arpabet = _CMUDICT
    return arpabet


def load_dictionary(config: DictionaryConfig) -> Arpabet:
    """Build a dictionary by layering custom dictionaries over CMUdict.

    Later custom dictionaries win over earlier ones, and all of them win over
    CMUdict.

    Args:
        config: which dictionaries to load
    """
    if config.include_cmudict:
        arpabet = load_cmudict().copy()
    else:
        arpabet = Arpabet()
    for path in config.custom_dictionaries:
        logger.debug(f"Layering {path} over {len(arpabet)} entries")
        arpabet.merge_from(load_from_file(path, encoding=config.encoding))
    return arpabet
