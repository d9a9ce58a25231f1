"""Document Emitter

Serializes an export tree to indented JSON text and reads it back.

- Keys are the camelCase form of the record fields, in declaration order.
- Fields that are None (absent curves, a missing renderer) are omitted.
- Floats are written at 32-bit precision: the shortest decimal that
  round-trips through float32.
- NaN and infinity are rejected with ValueError; JSON has no spelling for them.
"""

import json
from dataclasses import fields, is_dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union, get_args, get_origin, get_type_hints

import numpy as np

from ..core.schema import ParticleSystemExport


@lru_cache(maxsize=None)
def _hints(cls) -> Dict[str, Any]:
    return get_type_hints(cls)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _key(f) -> str:
    return f.metadata.get("key") or _camel(f.name)


def format_float32(value: float) -> float:
    """Round a float to float32 and back to its shortest decimal form."""
    return float(str(np.float32(value)))


# ----------------------------------------------------------------------
# Tree -> document
# ----------------------------------------------------------------------

def _encode(value, hint):
    if is_dataclass(value):
        return _record_to_dict(value)
    if isinstance(value, (tuple, list)):
        elem_hint = get_args(hint)[0] if get_args(hint) else None
        return [_encode(v, elem_hint) for v in value]
    if hint is float:
        return format_float32(value)
    if hint is int:
        return int(value)
    return value


def _record_to_dict(record) -> Dict[str, Any]:
    hints = _hints(type(record))
    out = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        out[_key(f)] = _encode(value, hints[f.name])
    return out


def to_document(tree: ParticleSystemExport) -> Dict[str, Any]:
    """Plain dict/list form of the tree, ready for JSON encoding."""
    return _record_to_dict(tree)


def dumps(tree: ParticleSystemExport, indent: int = 4) -> str:
    return json.dumps(to_document(tree), indent=indent, ensure_ascii=False, allow_nan=False) + "\n"


def write_document(tree: ParticleSystemExport, path: Union[str, Path], indent: int = 4) -> Path:
    """Write the tree as UTF-8 text, replacing any existing file."""
    path = Path(path)
    text = dumps(tree, indent=indent)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


# ----------------------------------------------------------------------
# Document -> tree
# ----------------------------------------------------------------------

def _decode(hint, raw):
    origin = get_origin(hint)
    if origin is Union:
        if raw is None:
            return None
        inner = next(a for a in get_args(hint) if a is not type(None))
        return _decode(inner, raw)
    if origin is tuple:
        elem_hint = get_args(hint)[0]
        return tuple(_decode(elem_hint, r) for r in raw)
    if is_dataclass(hint):
        return _record_from_dict(hint, raw)
    if hint is float:
        return float(raw)
    if hint is int:
        return int(raw)
    if hint is bool:
        return bool(raw)
    if hint is str:
        return str(raw)
    return raw


def _record_from_dict(cls, d):
    if not isinstance(d, dict):
        raise ValueError(f"Expected an object for {cls.__name__}, got {type(d).__name__}")
    hints = _hints(cls)
    kwargs = {}
    for f in fields(cls):
        key = _key(f)
        if key in d:
            kwargs[f.name] = _decode(hints[f.name], d[key])
    return cls(**kwargs)


def read_document(text: str) -> ParticleSystemExport:
    """Parse .gpart text. Missing sections and fields take the runtime defaults."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid .gpart document: {e}") from e
    return _record_from_dict(ParticleSystemExport, data)


def load_document(path: Union[str, Path]) -> ParticleSystemExport:
    with open(path, "r", encoding="utf-8") as f:
        return read_document(f.read())
