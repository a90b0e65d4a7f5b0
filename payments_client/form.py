"""
Form encoding for request parameters.

The API takes application/x-www-form-urlencoded bodies (and query strings)
where nested structures are flattened with bracket paths:

    metadata[order_id]=42
    line_items[0][price_data][currency]=usd
    expand[0]=customer

encode_params() turns a params model into an ordered FormValues;
decode_form() rebuilds the nested structure from flattened pairs.
"""

from __future__ import annotations

import re
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel


class FormValues:
    """Ordered multi-map of form keys to string values."""

    def __init__(self, pairs: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self._pairs: List[Tuple[str, str]] = list(pairs or [])

    def add(self, key: str, value: str) -> None:
        self._pairs.append((key, value))

    def set(self, key: str, value: str) -> None:
        """Replace every value under `key` with a single value (appended if absent)."""
        replaced = False
        pairs: List[Tuple[str, str]] = []
        for existing_key, existing_value in self._pairs:
            if existing_key != key:
                pairs.append((existing_key, existing_value))
            elif not replaced:
                pairs.append((key, value))
                replaced = True
        if not replaced:
            pairs.append((key, value))
        self._pairs = pairs

    def get(self, key: str) -> Optional[str]:
        for existing_key, value in self._pairs:
            if existing_key == key:
                return value
        return None

    def remove(self, key: str) -> None:
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    def to_pairs(self) -> List[Tuple[str, str]]:
        return list(self._pairs)

    def encode(self) -> str:
        return urlencode(self._pairs)

    def copy(self) -> "FormValues":
        return FormValues(self._pairs)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __repr__(self) -> str:
        return f"FormValues({self._pairs!r})"


def format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        text = repr(value)
        if "e" in text or "E" in text:
            text = format(Decimal(text), "f")
        return text
    return str(value)


def _flatten(prefix: str, value: Any, out: FormValues) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        for key, child in _model_items(value):
            _flatten(f"{prefix}[{key}]", child, out)
    elif isinstance(value, dict):
        for key, child in value.items():
            _flatten(f"{prefix}[{key}]", child, out)
    elif isinstance(value, (list, tuple)):
        for index, child in enumerate(value):
            _flatten(f"{prefix}[{index}]", child, out)
    else:
        out.add(prefix, format_scalar(value))


def _model_items(model: BaseModel) -> Iterator[Tuple[str, Any]]:
    """(wire name, value) for every encodable field, in declaration order."""
    for name, field_info in type(model).model_fields.items():
        if field_info.exclude:
            continue
        value = getattr(model, name)
        if value is None:
            continue
        yield field_info.alias or name, value


def encode_params(params: Optional[BaseModel]) -> FormValues:
    out = FormValues()
    if params is None:
        return out
    for key, value in _model_items(params):
        _flatten(key, value, out)
    return out


_KEY_PART = re.compile(r"\[([^\[\]]*)\]")


def _split_key(key: str) -> List[str]:
    head, bracket, _ = key.partition("[")
    parts = [head]
    if bracket:
        parts.extend(_KEY_PART.findall(key[len(head):]))
    return parts


def _listify(node: Any) -> Any:
    """Turn dicts keyed by consecutive integers 0..n-1 back into lists."""
    if not isinstance(node, dict):
        return node
    converted = {key: _listify(child) for key, child in node.items()}
    keys = list(converted.keys())
    if keys and all(key.isdigit() for key in keys):
        indexes = sorted(int(key) for key in keys)
        if indexes == list(range(len(indexes))):
            return [converted[str(index)] for index in indexes]
    return converted


def decode_form(pairs: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """
    Rebuild a nested structure from bracket-path form pairs.

    Values stay strings; list indexes become Python lists.
    """
    root: Dict[str, Any] = {}
    for key, value in pairs:
        parts = _split_key(key)
        node = root
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
    return {key: _listify(child) for key, child in root.items()}
