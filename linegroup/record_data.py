from dataclasses import dataclass, field
from typing import Iterator, List, Set, Tuple
import pandas as pd

SEPARATOR = ":"
N_FIELDS = 3


@dataclass(frozen=True, slots=True)
class Record:
    index: int
    fields: Tuple[str, str, str]

    def field(self, position: int) -> str:
        return self.fields[position]

    def render(self) -> str:
        return SEPARATOR.join(self.fields)

    def __str__(self) -> str:
        return self.render()


@dataclass
class GroupingResult:
    """Partition of the accepted input lines into connected groups.

    Attributes:
        groups (list[list[str]]): Rendered member lines of each group, groups
            ordered by size descending, members in input order.
        labels (list[int]): Dense partition label per record origin index,
            before the size ordering is applied.
    """

    groups: List[List[str]] = field(default_factory=list)
    labels: List[int] = field(default_factory=list)

    @property
    def total_groups(self) -> int:
        return len(self.groups)

    @property
    def groups_over_one(self) -> int:
        """Number of groups holding more than one line."""
        return sum(1 for g in self.groups if len(g) > 1)

    def sizes(self) -> List[int]:
        return [len(g) for g in self.groups]

    def members(self, position: int) -> List[str]:
        """Return the lines of the group at a 0-based output position.

        Args:
            position: Index into the size-ordered group list.

        Returns:
            list[str]: Rendered lines, or an empty list if out of range.
        """
        if 0 <= position < len(self.groups):
            return self.groups[position]
        return []

    def isolated_groups(self) -> Set[int]:
        """Return output positions of groups containing a single line."""
        return {i for i, g in enumerate(self.groups) if len(g) == 1}

    def to_frame(self) -> pd.DataFrame:
        """Flatten the groups into a DataFrame.

        Returns:
            pd.DataFrame: One row per line with columns [group, size, line],
            where group is the 1-based number used in the report.
        """
        rows = [
            {"group": number, "size": len(lines), "line": line}
            for number, lines in self
            for line in lines
        ]
        return pd.DataFrame(rows, columns=["group", "size", "line"])

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[Tuple[int, List[str]]]:
        """Iterate over groups as (1-based number, lines)."""
        for i, lines in enumerate(self.groups, start=1):
            yield i, lines
