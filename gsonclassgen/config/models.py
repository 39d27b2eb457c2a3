from __future__ import annotations

import logging
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator, model_validator

from ..naming import is_java_identifier

_LOGGER = logging.getLogger("gsonclassgen.config")


class OutputOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    getters: StrictBool = False
    setters: StrictBool = False
    final_fields: StrictBool = False
    field_constructor: StrictBool = False
    boxed_primitives: StrictBool = False

    @model_validator(mode="before")
    @classmethod
    def _final_fields_disable_setters(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and data.get("final_fields") is True and data.get("setters") is True:
            _LOGGER.warning("setters are disabled because final_fields is enabled")
            data = {**data, "setters": False}
        return data


class GeneratorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    gsonclassgen_config_version: Literal["1.0"] = "1.0"
    input: str
    class_name: str
    output_dir: str = "."
    options: OutputOptions = Field(default_factory=OutputOptions)

    @field_validator("input")
    @classmethod
    def _input_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("input must be a non-empty path")
        return value

    @field_validator("class_name")
    @classmethod
    def _class_name_is_identifier(cls, value: str) -> str:
        if not is_java_identifier(value):
            raise ValueError(f"class_name {value!r} is not a legal Java identifier")
        return value
