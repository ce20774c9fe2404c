import codecs
from pathlib import Path

from pydantic import Field, field_validator

from arpabet.config.shared_types import ConfigModel, init_context
from arpabet.config.utils import PossiblyRelativeFilePath
from arpabet.utils import load_config_from_json_or_yaml_path


class DictionaryConfig(ConfigModel):
    include_cmudict: bool = Field(
        default=True,
        title="Include CMUdict",
        description="Start from the built-in CMU Pronouncing Dictionary. If false, only the custom dictionaries are loaded.",
    )
    custom_dictionaries: list[PossiblyRelativeFilePath] = Field(
        default=[],
        title="Custom dictionaries",
        description="Dictionary files in the CMUdict format, layered in order over the built-in dictionary. Entries from later files replace entries for the same word from earlier files and from CMUdict. Relative paths are relative to this configuration file.",
        examples=["""["names.dict", "project-overrides.dict"]"""],
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the custom dictionaries. The original cmudict-0.7b release is latin-1.",
    )

    @field_validator("encoding")
    @classmethod
    def encoding_must_exist(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding '{value}'") from e
        return value

    @staticmethod
    def load_config_from_path(path: Path) -> "DictionaryConfig":
        """Load a config from a path"""
        config = load_config_from_json_or_yaml_path(path)
        with init_context({"config_path": path}):
            config = DictionaryConfig(**config)
        return config
