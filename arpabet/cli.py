import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich import print as rich_print
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from arpabet._version import VERSION


# See https://github.com/tiangolo/typer/issues/428#issuecomment-1238866548
class TyperGroupOrderAsDeclared(typer.core.TyperGroup):
    def list_commands(self, ctx):
        return self.commands.keys()


app = typer.Typer(
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="markdown",
    cls=TyperGroupOrderAsDeclared,
    help="""
    # Welcome to the arpabet Command Line Interface

    Look up the ARPABET pronunciation of English words in the CMU Pronouncing Dictionary,
    optionally layered with your own dictionaries.

    ## Look up words

    arpabet lookup WORD [WORD...] [OPTIONS]

    ## Check a dictionary file

    Validate a dictionary in the CMUdict format with: arpabet check FILE

    ## Precompute the built-in dictionary

    arpabet compile OUTPUT writes a table that loads without re-parsing the dictionary text.
    """,
)


def complete_path(ctx, param, incomplete) -> list[str]:
    # https://github.com/tiangolo/typer/discussions/625
    # Work-around for path completion bug in CLI shell_complete
    return []


@app.callback(invoke_without_command=True)
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", help="Print the version of arpabet and exit."
    ),
):
    """The top-level function that gets called first"""
    if version:
        print(VERSION)
        sys.exit(0)


def load_config(
    config_file: Optional[Path],
    config_args: Optional[List[str]],
    dictionaries: Optional[List[Path]],
    no_cmudict: bool,
):
    from arpabet.config import DictionaryConfig
    from arpabet.exceptions import InvalidConfiguration
    from arpabet.utils import update_config_from_cli_args

    try:
        if config_file is None:
            config = DictionaryConfig()
        else:
            config = DictionaryConfig.load_config_from_path(config_file)
        config = update_config_from_cli_args(config_args or [], config)
        if dictionaries or no_cmudict:
            config = config.update_config(
                {
                    "custom_dictionaries": list(config.custom_dictionaries)
                    + list(dictionaries or []),
                    "include_cmudict": config.include_cmudict and not no_cmudict,
                }
            )
    except (ValidationError, InvalidConfiguration, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    return config


@app.command(
    short_help="Look up the pronunciation of words",
    help="""
    # Lookup help

    Print the ARPABET phonemes of each WORD. Words are lowercased before the lookup.

    By default words are looked up in the built-in CMU Pronouncing Dictionary. Use --dictionary
    (repeatable) to layer your own dictionaries on top of it, later ones winning, or --config
    to read the same settings from a YAML or JSON file.
    """,
)
def lookup(
    words: List[str] = typer.Argument(..., help="The words to look up."),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="A YAML or JSON dictionary configuration file.",
        shell_complete=complete_path,
    ),
    config_args: List[str] = typer.Option(
        None,
        "-c",
        "--config-args",
        help="Override the configuration, e.g. -c include_cmudict=false",
    ),
    dictionaries: List[Path] = typer.Option(
        None,
        "--dictionary",
        "-d",
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="A custom dictionary file to layer over the others.",
        shell_complete=complete_path,
    ),
    no_cmudict: bool = typer.Option(
        False,
        "--no-cmudict",
        help="Do not load the built-in CMU Pronouncing Dictionary.",
    ),
    codes: bool = typer.Option(
        False, "--codes", help="Also print the integer code of each phoneme."
    ),
):
    from arpabet.builtin import load_dictionary
    from arpabet.exceptions import ArpabetError
    from arpabet.extensions import encode_polyphone

    config = load_config(config_file, config_args, dictionaries, no_cmudict)
    try:
        with Console(stderr=True).status("Loading dictionaries"):
            arpabet = load_dictionary(config)
    except ArpabetError as e:
        logger.error(f"Could not load the dictionaries: {e}")
        sys.exit(1)

    table = Table("WORD", "PHONEMES")
    if codes:
        table.add_column("CODES")
    missing = 0
    for word in words:
        polyphone = arpabet.get_polyphone(word.lower())
        if polyphone is None:
            missing += 1
            row = [escape(word), "[red]not found[/red]"] + ([""] if codes else [])
        else:
            row = [escape(word), " ".join(str(phoneme) for phoneme in polyphone)]
            if codes:
                row.append(" ".join(str(code) for code in encode_polyphone(polyphone)))
        table.add_row(*row)
    rich_print(table)
    if missing:
        sys.exit(1)


@app.command(
    short_help="Check that a dictionary file can be loaded",
    help="""
    # Check help

    Parse a dictionary file in the CMUdict format and report how many entries it has,
    or the first line that could not be read.
    """,
)
def check(
    dictionary: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="The dictionary file to check.",
        shell_complete=complete_path,
    ),
    encoding: str = typer.Option(
        "utf-8", "--encoding", "-e", help="The text encoding of the dictionary file."
    ),
):
    from arpabet.exceptions import ArpabetError, InvalidFormat
    from arpabet.parser import load_from_file

    try:
        arpabet = load_from_file(dictionary, encoding=encoding)
    except InvalidFormat as e:
        rich_print(
            Panel(
                escape(f"{dictionary}\nLine {e.line_number}: {e.text!r}"),
                title="Invalid format",
            )
        )
        sys.exit(1)
    except ArpabetError as e:
        logger.error(f"Could not load {dictionary}: {e}")
        sys.exit(1)
    rich_print(
        Panel(
            escape(f"{dictionary}\n{len(arpabet)} entries"),
            title="Valid dictionary",
        )
    )


@app.command(
    name="compile",
    short_help="Precompute a dictionary into a prebuilt table",
    help="""
    # Compile help

    Parse a dictionary once and write it as a JSON table of words to phoneme tokens.
    Without --dictionary, the bundled CMU Pronouncing Dictionary is compiled.

    A table written to arpabet/data/cmudict.json inside the installed package is used
    to load the built-in dictionary instead of parsing the dictionary text.
    """,
)
def compile_table(
    output: Path = typer.Argument(
        ...,
        dir_okay=False,
        file_okay=True,
        help="Where to write the table.",
        shell_complete=complete_path,
    ),
    dictionary: Optional[Path] = typer.Option(
        None,
        "--dictionary",
        "-d",
        exists=True,
        dir_okay=False,
        file_okay=True,
        help="Compile this dictionary file instead of the bundled CMUdict.",
        shell_complete=complete_path,
    ),
    encoding: str = typer.Option(
        "utf-8", "--encoding", "-e", help="The text encoding of the dictionary file."
    ),
):
    from arpabet.builtin import load_cmudict
    from arpabet.codegen import write_table
    from arpabet.exceptions import ArpabetError
    from arpabet.parser import load_from_file

    try:
        if dictionary is None:
            arpabet = load_cmudict()
        else:
            arpabet = load_from_file(dictionary, encoding=encoding)
        write_table(arpabet, output)
    except ArpabetError as e:
        logger.error(f"Could not compile the dictionary: {e}")
        sys.exit(1)


class TestSuites(str, Enum):
    all = "all"
    dev = "dev"
    model = "model"
    dictionary = "dictionary"
    config = "config"
    cli = "cli"


@app.command(hidden=True)
def test(suite: TestSuites = typer.Argument(TestSuites.dev)):
    """Run a test suite"""
    from arpabet.run_tests import run_tests

    if not run_tests(suite.value):
        sys.exit(1)


if __name__ == "__main__":
    app()
