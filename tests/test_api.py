import json

import pytest

from gsonclassgen.api import (
    InvalidJsonError,
    generate,
    generate_from_config,
    output_path,
    parse_file,
    read_json,
)
from gsonclassgen.builder import EmptySampleError
from gsonclassgen.config import OutputOptions, parse_config
from gsonclassgen.emitter import SERIALIZED_NAME_IMPORT


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_generate_writes_named_file(tmp_path):
    sample = _write(tmp_path / "user.json", {"id": 1, "address": {"city": "NYC"}})
    out_dir = tmp_path / "out" / "nested"
    path = generate(sample, "User", out_dir)
    assert path == out_dir / "User.java"
    source = path.read_text(encoding="utf-8")
    assert source.startswith(SERIALIZED_NAME_IMPORT + "\n\npublic final class User\n")
    assert "public static final class Address" in source
    assert sorted(p.name for p in out_dir.iterdir()) == ["User.java"]


def test_generate_applies_options(tmp_path):
    sample = _write(tmp_path / "user.json", {"id": 1})
    path = generate(sample, "User", tmp_path, OutputOptions(getters=True, boxed_primitives=True))
    source = path.read_text(encoding="utf-8")
    assert "private Integer id;" in source
    assert "public final Integer getId()" in source


def test_generate_overwrites_existing_file(tmp_path):
    sample = _write(tmp_path / "user.json", {"id": 1})
    (tmp_path / "User.java").write_text("stale", encoding="utf-8")
    path = generate(sample, "User", tmp_path)
    assert "stale" not in path.read_text(encoding="utf-8")


def test_invalid_json_is_reported(tmp_path):
    sample = tmp_path / "broken.json"
    sample.write_text('{"id": 1,', encoding="utf-8")
    with pytest.raises(InvalidJsonError, match="Invalid JSON"):
        read_json(sample)


def test_missing_file_is_reported(tmp_path):
    with pytest.raises(InvalidJsonError, match="Invalid JSON"):
        parse_file(tmp_path / "missing.json", "Root")


def test_empty_root_array_writes_nothing(tmp_path):
    sample = _write(tmp_path / "empty.json", [])
    out_dir = tmp_path / "out"
    with pytest.raises(EmptySampleError):
        generate(sample, "Root", out_dir)
    assert not output_path(out_dir, "Root").exists()


def test_parse_file_root_array(tmp_path):
    sample = _write(tmp_path / "list.json", [{"name": "a"}, {"name": "b"}])
    root = parse_file(sample, "Person")
    assert root.class_name == "Person"
    assert [f.name for f in root.fields] == ["name"]


def test_generate_from_config(tmp_path):
    sample = _write(tmp_path / "user.json", {"id": 1, "name": "x"})
    cfg = parse_config(
        {
            "input": str(sample),
            "class_name": "User",
            "output_dir": str(tmp_path / "gen"),
            "options": {"final_fields": True, "field_constructor": True},
        }
    )
    path = generate_from_config(cfg)
    source = path.read_text(encoding="utf-8")
    assert "this(0, null);" in source
