from typing import Iterable, Iterator, Optional, Set


class EmissionTracker:
    """
    Names of columns already represented in the output document.

    One tracker belongs to one serialization pass. A name, once marked, is
    never emitted again as a generic property.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Optional[Iterable[str]] = None):
        self._names: Set[str] = set(names or ())

    def contains(self, name: str) -> bool:
        return name in self._names

    def mark(self, name: str) -> None:
        self._names.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"EmissionTracker({sorted(self._names)})"
