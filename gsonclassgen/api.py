from __future__ import annotations

import json
import logging
import os
from pathlib import Path
import time
from typing import Any

from .builder import build_class
from .config import GeneratorConfig, OutputOptions
from .emitter import render_source
from .models import JavaClass

_LOGGER = logging.getLogger("gsonclassgen.api")


class InvalidJsonError(ValueError):
    """Raised when the sample document cannot be read or parsed."""


def read_json(path: str | Path) -> Any:
    try:
        with open(Path(path).expanduser(), "r", encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidJsonError(f"Invalid JSON: {exc}") from exc


def parse(sample: Any, class_name: str) -> JavaClass:
    return build_class(class_name, sample)


def parse_file(path: str | Path, class_name: str) -> JavaClass:
    return parse(read_json(path), class_name)


def output_path(output_dir: str | Path, class_name: str) -> Path:
    return Path(output_dir).expanduser() / f"{class_name}.java"


def write_source(java_class: JavaClass, output_dir: str | Path, options: OutputOptions | None = None) -> Path:
    source = render_source(java_class, options)
    target = output_path(output_dir, java_class.class_name)
    target.parent.mkdir(parents=True, exist_ok=True)

    staging = target.parent / f".tmp-{target.name}-{os.getpid()}-{time.time_ns()}"
    try:
        staging.write_text(source, encoding="utf-8")
        os.replace(staging, target)
    finally:
        if staging.exists():
            staging.unlink()

    _LOGGER.info("Wrote %s (%d classes)", target, sum(1 for _ in java_class.walk()))
    return target


def generate(
    json_path: str | Path,
    class_name: str,
    output_dir: str | Path = ".",
    options: OutputOptions | None = None,
) -> Path:
    java_class = parse_file(json_path, class_name)
    return write_source(java_class, output_dir, options)


def generate_from_config(config: GeneratorConfig) -> Path:
    return generate(config.input, config.class_name, config.output_dir, config.options)
