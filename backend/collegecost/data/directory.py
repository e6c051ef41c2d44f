"""Read-only mapping from college name to cost record."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from collegecost.models.college import CostRecord


class CollegeDirectory(Mapping[str, "CostRecord"]):
    """Immutable directory of college cost records.

    Keys are exact, case-sensitive college names. When the same name is
    given more than once, the last record wins.
    """

    def __init__(self, entries: Iterable[tuple[str, CostRecord]] = ()) -> None:
        records: dict[str, CostRecord] = {}
        for name, record in entries:
            records[name] = record
        self._records = MappingProxyType(records)

    def __getitem__(self, name: str) -> CostRecord:
        return self._records[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"CollegeDirectory({len(self)} colleges)"
