from __future__ import annotations

from typing import Iterable, List, Union

from .window import Line


class Separator:
    """Marker placed between two groups that are not contiguous."""

    _instance: "Separator | None" = None

    def __new__(cls) -> "Separator":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SEPARATOR"


SEPARATOR = Separator()

Record = Union[Line, Separator]


class GroupEmitter:
    """Orders emitted lines and decides where group separators go.

    A separator is owed once a line has been dropped after the last emitted
    group. It is only paid when the next group actually opens, so trailing
    gaps at end of input never produce one. With ``separators=False`` gaps
    still split groups but nothing is written between them.
    """

    def __init__(self, *, separators: bool = True) -> None:
        self._separators = separators
        self.first_group_emitted = False
        self.separator_owed = False
        self.groups = 0
        self.separators_emitted = 0

    def mark_gap(self) -> None:
        self.separator_owed = True

    def open_group(self, leading: Iterable[Line], match: Line) -> List[Record]:
        """Return the separator (if owed), the leading context and the match."""
        records: List[Record] = []
        if not self.first_group_emitted or self.separator_owed:
            self.groups += 1
            if self.first_group_emitted and self._separators:
                self.separators_emitted += 1
                records.append(SEPARATOR)
        records.extend(leading)
        records.append(match)
        self.first_group_emitted = True
        self.separator_owed = False
        return records
