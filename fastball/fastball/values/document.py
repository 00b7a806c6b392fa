"""Read-only view over a decoded value file with dotted attribute access."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ..core.errors import UndefinedValue


def wrap(value: Any) -> Any:
    """Wrap nested mappings so attribute access works at any depth."""
    if isinstance(value, ValueDocument):
        return value
    if isinstance(value, Mapping):
        return ValueDocument(value)
    if isinstance(value, (list, tuple)):
        return tuple(wrap(item) for item in value)
    return value


class ValueDocument(Mapping):
    """Mapping of config values where ``doc.db.host`` reads ``doc["db"]["host"]``.

    Keys that collide with mapping methods (``items``, ``get``, ...) are still
    reachable with item access. Sequences are exposed as tuples so the document
    cannot be mutated through a template.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        object.__setattr__(self, "_data", dict(data or {}))

    def __getitem__(self, key: str) -> Any:
        return wrap(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!s} has no value {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def lookup(self, dotted_key: str) -> Any:
        """Resolve a dotted path such as ``"db.host"``.

        Raises:
            UndefinedValue: if any segment of the path is missing.
        """
        node: Any = self
        walked: list[str] = []
        for part in dotted_key.split("."):
            walked.append(part)
            if not isinstance(node, Mapping) or part not in node:
                raise UndefinedValue(f"'{'.'.join(walked)}' is undefined")
            node = node[part]
        return node

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)
