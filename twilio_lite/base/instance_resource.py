from __future__ import annotations

from typing import Any, Callable, Dict, Optional


class Field:
    """Read-only accessor for one wire field of an instance.

    The attribute name is the snake_case wire name; `deserializer` turns the
    raw JSON value into its Python type (dates, decimals...).
    """

    def __init__(self, deserializer: Optional[Callable[[Any], Any]] = None) -> None:
        self.deserializer = deserializer
        self.name = ""

    def __set_name__(self, owner, name: str) -> None:
        self.name = name

    def load(self, payload: Dict[str, Any]) -> Any:
        raw = payload.get(self.name)
        if self.deserializer is None:
            return raw
        return self.deserializer(raw)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance._properties.get(self.name)


class InstanceResource:
    """In-memory copy of one resource, as last returned by the server."""

    def __init__(self, version, payload: Dict[str, Any]) -> None:
        self._version = version
        self._properties = {
            f.name: f.load(payload) for f in self._fields()
        }
        self._context = None
        self._solution: Dict[str, Any] = {}

    @classmethod
    def _fields(cls):
        seen = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Field):
                    seen[name] = value
        return list(seen.values())

    @property
    def _proxy(self):
        raise NotImplementedError(f"{type(self).__name__} has no context")

    def remove(self) -> bool:
        return self.delete()

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._properties)

    def __repr__(self) -> str:
        context = " ".join(f"{k}={v}" for k, v in self._solution.items())
        return f"<{type(self).__name__} {context}>"
