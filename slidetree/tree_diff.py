"""Path-addressed structural diff over JSON-like value trees."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .errors import SerializationError

MAX_DISPLAY_LENGTH = 60
TRUNCATED_LENGTH = 57

Scalar = Union[str, int, float, bool, None]


class ChangeType(Enum):
    ADDED = "Added"
    REMOVED = "Removed"
    MODIFIED = "Modified"


class ValueKind(Enum):
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    NULL = "Null"
    ARRAY = "Array"
    OBJECT = "Object"


@dataclass(slots=True, frozen=True)
class ValueSummary:
    """Display-only projection of a diffed value.

    Scalars keep their value; arrays keep only their length and objects keep
    nothing but their kind.
    """

    kind: ValueKind
    value: Scalar = None
    length: Optional[int] = None

    @classmethod
    def from_value(cls, value: Any) -> "ValueSummary":
        if value is None:
            return cls(ValueKind.NULL)
        if isinstance(value, bool):
            return cls(ValueKind.BOOLEAN, value)
        if isinstance(value, (int, float)):
            return cls(ValueKind.NUMBER, value)
        if isinstance(value, str):
            return cls(ValueKind.STRING, value)
        if isinstance(value, list):
            return cls(ValueKind.ARRAY, length=len(value))
        if isinstance(value, dict):
            return cls(ValueKind.OBJECT)
        raise SerializationError(
            f"cannot summarize value of type {type(value).__name__}",
            context="ValueSummary",
        )

    @property
    def is_scalar(self) -> bool:
        return self.kind in (ValueKind.STRING, ValueKind.NUMBER, ValueKind.BOOLEAN)

    def format_for_display(self) -> str:
        if self.kind is ValueKind.STRING:
            text = str(self.value)
            suffix = ""
            if len(text) > MAX_DISPLAY_LENGTH:
                text, suffix = text[:TRUNCATED_LENGTH], "..."
            return f'"{_escape(text)}{suffix}"'
        if self.kind is ValueKind.NUMBER:
            return json.dumps(self.value)
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind is ValueKind.NULL:
            return "null"
        if self.kind is ValueKind.ARRAY:
            return f"[Array len={self.length}]"
        return "{Object}"

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"type": self.kind.value}
        if self.kind is ValueKind.ARRAY:
            payload["length"] = self.length
        elif self.kind is not ValueKind.OBJECT:
            payload["value"] = self.value
        return payload


@dataclass(slots=True)
class Change:
    path: str
    change_type: ChangeType
    old_value: Optional[ValueSummary] = None
    new_value: Optional[ValueSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "changeType": self.change_type.value,
            "oldValue": self.old_value.to_dict() if self.old_value else None,
            "newValue": self.new_value.to_dict() if self.new_value else None,
        }


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------
def to_generic_value(obj: Any) -> Any:
    """Convert a model (anything with ``to_dict``) or plain data into a JSON tree.

    The result contains only ``dict`` (string keys), ``list``, ``str``,
    ``int``, finite ``float``, ``bool`` and ``None``; anything else raises
    :class:`SerializationError`.
    """

    if hasattr(obj, "to_dict"):
        try:
            obj = obj.to_dict()
        except (TypeError, ValueError, AttributeError) as exc:
            raise SerializationError(
                f"failed to serialize {type(obj).__name__}", original_error=exc
            ) from exc
    return _convert(obj, "")


def diff(base: Any, other: Any) -> List[Change]:
    """Return the ordered list of changes turning ``base`` into ``other``.

    Both inputs must be generic value trees from :func:`to_generic_value`;
    other values raise :class:`SerializationError` when summarized. A change
    between two root values of different kinds has the empty path ``""``,
    which stands for the root.
    """

    collector = _ChangeCollector()
    collector.walk(base, other)
    return collector.changes


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------
class _ChangeCollector:
    def __init__(self) -> None:
        self.segments: List[str] = []
        self.changes: List[Change] = []

    @property
    def path(self) -> str:
        return "".join(self.segments)

    def walk(self, base: Any, other: Any) -> None:
        if isinstance(base, dict) and isinstance(other, dict):
            self._walk_objects(base, other)
        elif isinstance(base, list) and isinstance(other, list):
            self._walk_arrays(base, other)
        elif not _same_value(base, other):
            self._record(
                ChangeType.MODIFIED,
                ValueSummary.from_value(base),
                ValueSummary.from_value(other),
            )

    def _walk_objects(self, base: Dict[str, Any], other: Dict[str, Any]) -> None:
        for key, value in base.items():
            self._push_key(key)
            if key in other:
                self.walk(value, other[key])
            else:
                self._record(ChangeType.REMOVED, ValueSummary.from_value(value), None)
            self.segments.pop()
        for key, value in other.items():
            if key in base:
                continue
            self._push_key(key)
            self._record(ChangeType.ADDED, None, ValueSummary.from_value(value))
            self.segments.pop()

    def _walk_arrays(self, base: List[Any], other: List[Any]) -> None:
        for position in range(max(len(base), len(other))):
            self.segments.append(f"[{position}]")
            if position >= len(other):
                self._record(
                    ChangeType.REMOVED, ValueSummary.from_value(base[position]), None
                )
            elif position >= len(base):
                self._record(
                    ChangeType.ADDED, None, ValueSummary.from_value(other[position])
                )
            else:
                self.walk(base[position], other[position])
            self.segments.pop()

    def _push_key(self, key: str) -> None:
        self.segments.append(key if not self.segments else f".{key}")

    def _record(
        self,
        change_type: ChangeType,
        old_value: Optional[ValueSummary],
        new_value: Optional[ValueSummary],
    ) -> None:
        self.changes.append(Change(self.path, change_type, old_value, new_value))


def _same_value(base: Any, other: Any) -> bool:
    return type(base) is type(other) and base == other


def _convert(value: Any, path: str) -> Any:
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(f"non-finite number {value!r}", context=path or "<root>")
        return value
    if isinstance(value, dict):
        converted: Dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise SerializationError(
                    f"object key {key!r} is not a string", context=path or "<root>"
                )
            converted[key] = _convert(item, f"{path}.{key}" if path else key)
        return converted
    if isinstance(value, (list, tuple)):
        return [_convert(item, f"{path}[{i}]") for i, item in enumerate(value)]
    raise SerializationError(
        f"unsupported value of type {type(value).__name__}", context=path or "<root>"
    )


def _escape(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
