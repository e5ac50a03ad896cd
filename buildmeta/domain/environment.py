from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from types import MappingProxyType


class EnvironmentSnapshot(Mapping[str, str]):
    """Read-only copy of the process environment taken once per build.

    Resolvers receive the snapshot explicitly instead of calling os.getenv,
    so they can be exercised with synthetic maps.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._values) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        # Values may hold credentials.
        return f"EnvironmentSnapshot(keys={sorted(self._values)})"


def capture_environment(source: Mapping[str, str] | None = None) -> EnvironmentSnapshot:
    if source is None:
        source = os.environ
    return EnvironmentSnapshot(source)
