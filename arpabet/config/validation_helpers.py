from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationInfo


def relative_to_absolute_path(
    value: Any, info: Optional[ValidationInfo]
) -> Path | None:
    """
    Helper function to annotate a type.
    Relative paths are resolved with respect to the configuration file they
    came from, when the config_path is known from the validation context.
    """
    if value is None:
        return value

    try:
        path = Path(value)
        if (
            not path.is_absolute()
            and info
            and info.context
            and (config_path := info.context.get("config_path", None))
        ):
            path = (config_path.parent / path).resolve()
        return path
    except TypeError as e:
        # Pydantic needs ValueErrors to raise its ValidationErrors
        raise ValueError from e


def path_is_a_file(value: Path) -> Path:
    """
    Helper function to annotate a type.
    Verifies that `value` is an existing file.
    """
    if not value.is_file():
        raise ValueError(f"{value} is not a file")
    return value
