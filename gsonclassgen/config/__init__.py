from __future__ import annotations

import json
from typing import Mapping

import yaml
from pydantic import ValidationError

from .models import GeneratorConfig, OutputOptions

__all__ = [
    "GeneratorConfig",
    "OutputOptions",
    "ValidationError",
    "config_schema",
    "load_config",
    "parse_config",
]


def load_config(path: str) -> dict:
    if path.endswith(".json"):
        with open(path, "r", encoding="utf-8") as handle:
            return json.load(handle)
    if path.endswith(".yaml") or path.endswith(".yml"):
        with open(path, "r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    raise ValueError("Config file must be .json or .yaml")


def parse_config(data: Mapping[str, object]) -> GeneratorConfig:
    return GeneratorConfig.model_validate(data)


def config_schema() -> dict:
    """JSON Schema for generator config files, for editor and CI validation."""
    schema = GeneratorConfig.model_json_schema()
    schema["title"] = "gsonclassgen run configuration"
    return schema
