"""JSON text codec: serialise values and rebuild them as instances of a class.

Example:
    text = to_text(Rectangle(10, 20))        # '{"width":10,"height":20}'
    rect = from_text(Rectangle, text)
    rect.get_area()                          # 200
"""

from __future__ import annotations

import dataclasses
import json
import logging
from enum import Enum
from typing import Any, TypeVar

from objkit.codec.errors import ParseError, SerializationError

__all__ = ["to_text", "parse_text", "from_text"]

log = logging.getLogger(__name__)

T = TypeVar("T")

_COMPACT_SEPARATORS = (",", ":")


def _encode_object(value: Any) -> Any:
    """Fallback encoder for values the json module does not know.

    Instances carrying their own attributes encode as objects of those
    attributes and enum members by their value; callables and everything
    else are rejected.
    """
    if callable(value):
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "__dict__"):
        return dict(vars(value))
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_text(value: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Return the JSON representation of *value*.

    Output is compact unless *indent* is given. Raises SerializationError
    for cyclic structures, callables, non-finite floats and any other
    value outside the JSON data model.
    """
    separators = _COMPACT_SEPARATORS if indent is None else None
    try:
        text = json.dumps(
            value,
            indent=indent,
            separators=separators,
            sort_keys=sort_keys,
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_object,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialise value: {exc}") from exc
    log.debug("Serialised %s to %d characters", type(value).__name__, len(text))
    return text


def _reject_constant(name: str) -> Any:
    raise ParseError(f"Invalid JSON: {name} is not a JSON value")


def parse_text(text: str | bytes) -> Any:
    """Parse JSON *text* into plain Python data (dicts, lists, scalars).

    The non-standard NaN and Infinity literals are rejected.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid JSON: undecodable bytes ({exc.reason})") from exc


def from_text(capability_set: type[T], text: str | bytes) -> T | Any:
    """Rebuild an instance of *capability_set* from the JSON in *text*.

    The instance is created without running the class constructor; every
    key of the parsed object becomes an attribute of the new instance, so
    it gains the class's methods while carrying the parsed data. The
    class itself is left untouched.

    Arrays and scalars have no fields to carry and are returned as parsed.
    """
    if not isinstance(capability_set, type):
        raise TypeError(
            f"capability_set must be a class, got {type(capability_set).__name__}"
        )

    data = parse_text(text)
    if not isinstance(data, dict):
        return data

    instance = capability_set.__new__(capability_set)
    for key, value in data.items():
        try:
            object.__setattr__(instance, key, value)
        except AttributeError as exc:
            raise TypeError(
                f"{capability_set.__name__} instances cannot carry field {key!r}"
            ) from exc

    log.debug("Rebuilt %s with fields %s", capability_set.__name__, list(data))
    return instance
