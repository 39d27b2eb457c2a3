from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Iterable

from pydantic import ValidationError

from .api import generate, generate_from_config, parse_file
from .config import GeneratorConfig, OutputOptions, config_schema, load_config
from .emitter import render_source
from .naming import is_java_identifier


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _add_sample_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", help="Path to the sample JSON document")
    parser.add_argument("class_name", help="Name of the generated root class")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def _options_from_args(args: argparse.Namespace) -> OutputOptions:
    return OutputOptions(
        getters=args.getters,
        setters=args.setters,
        final_fields=args.final_fields,
        field_constructor=args.field_constructor,
        boxed_primitives=args.boxed_primitives,
    )


def _check_class_name(class_name: str) -> bool:
    if is_java_identifier(class_name):
        return True
    print(f"Invalid class name: {class_name!r} is not a legal Java identifier")
    return False


def _load_generator_config(path: str) -> GeneratorConfig | None:
    try:
        data = load_config(path)
    except Exception as exc:
        print(f"Config load failed: {exc}")
        return None

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as exc:
        print("Config validation failed\n")
        print(exc.json(indent=2))
        return None


def _run_generate(args: argparse.Namespace) -> int:
    if not _check_class_name(args.class_name):
        return 2
    options = _options_from_args(args)
    try:
        if args.stdout:
            java_class = parse_file(args.input, args.class_name)
            sys.stdout.write(render_source(java_class, options))
            return 0
        path = generate(args.input, args.class_name, args.output_dir, options)
    except (OSError, ValueError) as exc:
        print(str(exc))
        return 1
    print(f"Generated {path}")
    return 0


def _run_config(path: str) -> int:
    cfg = _load_generator_config(path)
    if cfg is None:
        return 1
    try:
        output = generate_from_config(cfg)
    except (OSError, ValueError) as exc:
        print(str(exc))
        return 1
    print(f"Generated {output}")
    return 0


def _run_validate(path: str) -> int:
    cfg = _load_generator_config(path)
    if cfg is None:
        return 1
    print("Config is valid")
    print(f"Input: {cfg.input}")
    print(f"Class: {cfg.class_name}")
    print(f"Output dir: {cfg.output_dir}")
    enabled = [name for name, value in cfg.options.model_dump().items() if value]
    print(f"Options: {', '.join(enabled) if enabled else 'none'}")
    return 0


def _run_schema(out: str | None) -> int:
    rendered = json.dumps(config_schema(), indent=2, sort_keys=True)
    if out is None:
        print(rendered)
        return 0
    path = Path(out)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(rendered + "\n", encoding="utf-8")
    print(f"Config schema written to {path}")
    return 0


def _run_inspect(input_path: str, class_name: str) -> int:
    if not _check_class_name(class_name):
        return 2
    try:
        java_class = parse_file(input_path, class_name)
    except (OSError, ValueError) as exc:
        print(str(exc))
        return 1
    print(json.dumps(java_class.to_dict(), indent=2))
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    if len(argv) > 0 and argv[0] in {"run", "validate", "inspect", "schema"}:
        cmd = argv[0]
        if cmd == "run":
            parser = argparse.ArgumentParser(description="Generate a class from a config file")
            parser.add_argument("path", help="Path to config file (.json/.yaml)")
            parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
            args = parser.parse_args(argv[1:])
            _configure_logging(args.verbose)
            return _run_config(args.path)
        if cmd == "validate":
            parser = argparse.ArgumentParser(description="Validate a gsonclassgen config")
            parser.add_argument("path", help="Path to config file (.json/.yaml)")
            args = parser.parse_args(argv[1:])
            return _run_validate(args.path)
        if cmd == "inspect":
            parser = argparse.ArgumentParser(description="Print the inferred class model as JSON")
            _add_sample_arguments(parser)
            args = parser.parse_args(argv[1:])
            _configure_logging(args.verbose)
            return _run_inspect(args.input, args.class_name)
        if cmd == "schema":
            parser = argparse.ArgumentParser(description="Print the JSON Schema of gsonclassgen config files")
            parser.add_argument("--out", default=None, help="Write the schema to this file instead of stdout")
            args = parser.parse_args(argv[1:])
            return _run_schema(args.out)

    parser = argparse.ArgumentParser(description="Generate a Gson annotated Java class from sample JSON")
    _add_sample_arguments(parser)
    parser.add_argument("-o", "--output-dir", default=".", help="Directory for the generated .java file")
    parser.add_argument("--stdout", action="store_true", help="Print the source instead of writing a file")
    parser.add_argument("--getters", action="store_true", help="Generate getters")
    parser.add_argument("--setters", action="store_true", help="Generate setters (ignored with --final-fields)")
    parser.add_argument("--final-fields", action="store_true", help="Declare fields final")
    parser.add_argument("--field-constructor", action="store_true", help="Generate an all-arguments constructor")
    parser.add_argument(
        "--boxed-primitives",
        action="store_true",
        help="Use Boolean/Integer/Float instead of primitive types",
    )
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return _run_generate(args)


if __name__ == "__main__":
    sys.exit(main())
