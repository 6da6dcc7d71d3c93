from __future__ import annotations

"""
Unit tests for JSON / YAML persistence.

Verifies round trips, output formatting, typed loading and the mapping
of codec failures onto the error taxonomy.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from fileutils.core.serialization import load_json, load_yaml, save_json, save_yaml
from fileutils.domain.errors import DecodeFailureError, EncodeFailureError, NotFoundError


@dataclass
class Settings:
    name: str
    tags: List[str]
    retries: int = 0


@dataclass
class Inner:
    x: int


@dataclass
class Outer:
    name: str
    inner: Inner
    items: List[Inner]
    by_key: Dict[str, Inner]
    extra: Optional[Inner] = None


SAMPLE = {"name": "demo", "tags": ["a", "b"], "nested": {"x": 1.5, "ok": True, "none": None}}


def test_json_round_trip(tmp_path: Path) -> None:
    """TC-01: save_json then load_json returns an equal value."""
    path = tmp_path / "data.json"
    save_json(str(path), SAMPLE)
    assert load_json(str(path)) == SAMPLE


def test_json_uses_two_space_indent(tmp_path: Path) -> None:
    """TC-02: Output is indented with two spaces."""
    path = tmp_path / "data.json"
    save_json(str(path), {"k": [1]})
    assert path.read_text(encoding="utf-8") == '{\n  "k": [\n    1\n  ]\n}'


def test_yaml_round_trip(tmp_path: Path) -> None:
    """TC-03: save_yaml then load_yaml returns an equal value."""
    path = tmp_path / "data.yaml"
    save_yaml(str(path), SAMPLE)
    assert load_yaml(str(path)) == SAMPLE


def test_yaml_block_style_keeps_key_order(tmp_path: Path) -> None:
    """TC-04: YAML is written in block style without sorting keys."""
    path = tmp_path / "order.yaml"
    save_yaml(str(path), {"z": 1, "a": [1, 2]})
    assert path.read_text(encoding="utf-8") == "z: 1\na:\n- 1\n- 2\n"


def test_typed_load_into_dataclass(tmp_path: Path) -> None:
    """TC-05: Dataclasses are saved as mappings and rebuilt on load."""
    path = tmp_path / "settings.json"
    save_json(str(path), Settings(name="svc", tags=["x"], retries=3))

    loaded = load_json(str(path), into=Settings)
    assert loaded == Settings(name="svc", tags=["x"], retries=3)

    ypath = tmp_path / "settings.yaml"
    save_yaml(str(ypath), loaded)
    assert load_yaml(str(ypath), into=Settings) == loaded


def test_typed_load_with_callable(tmp_path: Path) -> None:
    """TC-06: Any callable can convert the decoded value."""
    path = tmp_path / "list.json"
    save_json(str(path), [3, 1, 2])
    assert load_json(str(path), into=sorted) == [1, 2, 3]


def test_typed_load_mismatch_is_decode_failure(tmp_path: Path) -> None:
    """TC-07: A converter rejecting the data is a DecodeFailureError."""
    path = tmp_path / "bad.json"
    save_json(str(path), {"unexpected": 1})
    with pytest.raises(DecodeFailureError):
        load_json(str(path), into=Settings)


def test_malformed_inputs(tmp_path: Path) -> None:
    """TC-08: Broken JSON and YAML raise DecodeFailureError."""
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json", encoding="utf-8")
    bad_yaml = tmp_path / "bad.yaml"
    bad_yaml.write_text("key: [unclosed", encoding="utf-8")

    with pytest.raises(DecodeFailureError):
        load_json(str(bad_json))
    with pytest.raises(DecodeFailureError):
        load_yaml(str(bad_yaml))


def test_unserializable_values(tmp_path: Path) -> None:
    """TC-09: Values the codecs cannot represent raise EncodeFailureError."""
    with pytest.raises(EncodeFailureError):
        save_json(str(tmp_path / "x.json"), {"s": {1, 2}})
    with pytest.raises(EncodeFailureError):
        save_yaml(str(tmp_path / "x.yaml"), {"o": object()})
    assert not (tmp_path / "x.json").exists()


def test_missing_file(tmp_path: Path) -> None:
    """TC-10: Reading a missing file is NotFoundError."""
    with pytest.raises(NotFoundError):
        load_yaml(str(tmp_path / "missing.yaml"))


def test_nested_dataclasses_round_trip(tmp_path: Path) -> None:
    """TC-11: Dataclass fields holding dataclasses are rebuilt on load."""
    obj = Outer("n", Inner(1), [Inner(2), Inner(3)], {"k": Inner(4)}, Inner(5))

    path = tmp_path / "outer.json"
    save_json(str(path), obj)
    assert load_json(str(path), into=Outer) == obj

    ypath = tmp_path / "outer.yaml"
    save_yaml(str(ypath), Outer("m", Inner(0), [], {}))
    assert load_yaml(str(ypath), into=Outer) == Outer("m", Inner(0), [], {})


def test_dataclasses_inside_containers_are_saved(tmp_path: Path) -> None:
    """TC-12: Dataclasses nested in lists and dicts serialize as mappings."""
    path = tmp_path / "list.json"
    save_json(str(path), [Inner(1), {"inner": Inner(2)}])
    assert load_json(str(path)) == [{"x": 1}, {"inner": {"x": 2}}]


def test_nested_field_mismatch_is_decode_failure(tmp_path: Path) -> None:
    """TC-13: A nested field that is not a mapping cannot be rebuilt."""
    path = tmp_path / "bad_outer.json"
    save_json(str(path), {"name": "n", "inner": 7, "items": [], "by_key": {}})
    with pytest.raises(DecodeFailureError):
        load_json(str(path), into=Outer)
