from __future__ import annotations

"""
Structured File Persistence.

Read-then-decode and encode-then-write helpers for JSON (standard
library) and YAML (PyYAML). Loaders optionally pass the decoded value
through a converter, so callers get a typed object back instead of raw
dicts and lists. Savers accept dataclass instances directly.
"""

import dataclasses
import json
import logging
from typing import (
    Any,
    Callable,
    Optional,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
    overload,
)

import yaml

from fileutils.domain.constants import JSON_INDENT
from fileutils.domain.errors import DecodeFailureError, EncodeFailureError
from fileutils.infra.fs import translate_os_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

# -----------------------------------------------------------------------------
# JSON
# -----------------------------------------------------------------------------

@overload
def load_json(path: str) -> Any: ...
@overload
def load_json(path: str, into: Callable[[Any], T]) -> T: ...


def load_json(path: str, into: Optional[Callable[[Any], T]] = None) -> Any:
    """
    Load a JSON file.

    Args:
        path: File to read.
        into: Optional converter applied to the decoded value: a dataclass
            (rebuilt field by field, nested dataclasses included) or any
            callable taking the decoded value.

    Returns:
        The decoded (and converted) value.

    Raises:
        DecodeFailureError: on malformed JSON or a failing converter.
        NotFoundError, PermissionDeniedError, IOFailureError
    """
    text = _read_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeFailureError(f"Malformed JSON ({e})", path) from e
    return _convert(data, into, path)


def save_json(path: str, obj: Any, indent: int = JSON_INDENT) -> None:
    """
    Serialize ``obj`` to JSON and write it to ``path``.

    Raises:
        EncodeFailureError: if the value is not JSON serializable.
        NotFoundError, PermissionDeniedError, IOFailureError
    """
    try:
        text = json.dumps(_to_plain(obj), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodeFailureError(f"Value is not JSON serializable ({e})", path) from e
    _write_text(path, text)

# -----------------------------------------------------------------------------
# YAML
# -----------------------------------------------------------------------------

@overload
def load_yaml(path: str) -> Any: ...
@overload
def load_yaml(path: str, into: Callable[[Any], T]) -> T: ...


def load_yaml(path: str, into: Optional[Callable[[Any], T]] = None) -> Any:
    """
    Load a YAML file with ``yaml.safe_load``.

    See load_json for the meaning of ``into``.
    """
    text = _read_text(path)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DecodeFailureError(f"Malformed YAML ({e})", path) from e
    return _convert(data, into, path)


def save_yaml(path: str, obj: Any) -> None:
    """Serialize ``obj`` to block-style YAML and write it to ``path``."""
    try:
        text = yaml.safe_dump(
            _to_plain(obj),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
    except yaml.YAMLError as e:
        raise EncodeFailureError(f"Value is not YAML serializable ({e})", path) from e
    _write_text(path, text)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DecodeFailureError(f"File is not valid UTF-8 ({e})", path) from e
    except OSError as e:
        raise translate_os_error(e, path) from e


def _write_text(path: str, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise translate_os_error(e, path) from e
    logger.debug(f"Wrote {len(text)} characters to {path}")


def _to_plain(obj: Any) -> Any:
    """Turn dataclass instances (at any depth) into mappings and tuples into lists."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _to_plain(dataclasses.asdict(obj))
    if isinstance(obj, dict):
        return {k: _to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_plain(v) for v in obj]
    return obj


def _convert(data: Any, into: Optional[Callable[[Any], T]], path: str) -> Any:
    if into is None:
        return data
    try:
        if dataclasses.is_dataclass(into):
            return _build(into, data)
        return into(data)
    except (TypeError, ValueError, NameError) as e:
        raise DecodeFailureError(f"Cannot convert decoded value ({e})", path) from e


def _build(tp: Any, data: Any) -> Any:
    """
    Rebuild ``data`` as an instance of the annotated type ``tp``.

    Dataclass fields are resolved with ``typing.get_type_hints`` so nested
    dataclasses, including those inside List/Tuple/Dict/Optional fields,
    are rebuilt too. Anything else is returned unchanged.
    """
    if dataclasses.is_dataclass(tp) and isinstance(tp, type):
        if not isinstance(data, dict):
            raise TypeError(f"expected a mapping for {tp.__name__}, got {type(data).__name__}")
        hints = get_type_hints(tp)
        return tp(**{k: _build(hints.get(k, Any), v) for k, v in data.items()})

    origin = get_origin(tp)
    args = get_args(tp)
    if origin is Union:
        if data is None:
            return None
        members = [a for a in args if a is not type(None)]
        return _build(members[0], data) if len(members) == 1 else data
    if not args or data is None:
        return data
    if origin in (list, set, frozenset) and isinstance(data, list):
        return origin(_build(args[0], v) for v in data)
    if origin is tuple and isinstance(data, list):
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_build(args[0], v) for v in data)
        return tuple(_build(a, v) for a, v in zip(args, data))
    if origin is dict and isinstance(data, dict) and len(args) == 2:
        return {k: _build(args[1], v) for k, v in data.items()}
    return data
