"""cssbuilder model layer -- public type re-exports."""

from cssbuilder.model.rectangle import Rectangle
from cssbuilder.model.serialization import from_json, to_json

__all__ = [
    "Rectangle",
    "to_json",
    "from_json",
]
