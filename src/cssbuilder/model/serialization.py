"""JSON helpers: render objects as compact JSON and restore them onto a class."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are rendered from their fields::

        to_json([1, 2, 3])            # '[1,2,3]'
        to_json(Rectangle(10, 20))    # '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* into an instance of *cls* without calling its constructor.

    The JSON must be an object; its keys become instance attributes, so the
    class's methods and properties operate on the parsed data.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    # Bypasses __setattr__ so frozen dataclasses can be restored too.
    obj.__dict__.update(data)
    return obj
