from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Union

from pydantic import BaseModel, ConfigDict

_init_context_var = ContextVar("_init_context_var", default=None)


@contextmanager
def init_context(value: Dict[str, Any]) -> Iterator[None]:
    """
    Pass a context down to the validators of a ConfigModel, e.g. the path of
    the configuration file being loaded so relative paths can be resolved.
    pydantic has no way to give a context to BaseModel.__init__, so
    ConfigModel reads it from this context variable instead.

    Usage:
        with init_context({"config_path": path}):
            config = DictionaryConfig(**data)
    """
    token = _init_context_var.set(value)  # type: ignore
    try:
        yield
    finally:
        _init_context_var.reset(token)


class ConfigModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"$schema": "http://json-schema.org/draft-07/schema#"},
    )

    # [Using validation context with BaseModel initialization](https://docs.pydantic.dev/2.3/usage/validators/#using-validation-context-with-basemodel-initialization)
    def __init__(__pydantic_self__, **data: Any) -> None:
        __pydantic_self__.__pydantic_validator__.validate_python(
            data,
            self_instance=__pydantic_self__,
            context=_init_context_var.get(),
        )

    def update_config(self, new_config: dict):
        """Update the config with new values"""
        new_data = self.combine_configs(dict(self), new_config)
        self.__init__(**new_data)  # type: ignore
        return self

    @staticmethod
    def combine_configs(orig_dict: Union[dict, Sequence], new_dict: Mapping):
        """Recursively overlay new_dict on orig_dict; list items are addressed
        by their index as a string key, e.g. {"custom_dictionaries": {"0": path}}

        >>> ConfigModel.combine_configs({"a": 1, "b": [1, 2]}, {"b": {"1": 3}})
        {'a': 1, 'b': [1, 3]}
        """
        if isinstance(orig_dict, Sequence):
            orig_list = list(orig_dict)
            for key_s, val in new_dict.items():
                key_i = int(key_s)
                if isinstance(val, Mapping):
                    val = ConfigModel.combine_configs(orig_list[key_i], val)
                if key_i == len(orig_list):
                    orig_list.append(val)
                else:
                    orig_list[key_i] = val
            return orig_list

        combined = dict(orig_dict)
        for key, val in new_dict.items():
            if isinstance(val, Mapping):
                combined[key] = ConfigModel.combine_configs(combined.get(key, {}), val)
            else:
                combined[key] = val
        return combined
