from pathlib import Path

from pydantic.functional_validators import AfterValidator, BeforeValidator
from typing_extensions import Annotated

from .validation_helpers import path_is_a_file, relative_to_absolute_path

# The path is made absolute before it is checked
PossiblyRelativeFilePath = Annotated[
    Path,
    AfterValidator(path_is_a_file),
    BeforeValidator(relative_to_absolute_path),
]
