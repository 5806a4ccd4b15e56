from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .config import EmptinessPolicy
from .record_data import GroupingResult, Record, N_FIELDS
from .union_find import UnionFind

logger = logging.getLogger(__name__)

# ---------------- Types ----------------
FieldOrder = Tuple[int, ...]
DEFAULT_FIELD_ORDER: FieldOrder = tuple(range(N_FIELDS))


# ---------------- Stage 1: per-field connectivity ----------------
def sort_by_field(records: Sequence[Record], position: int) -> List[Record]:
    # origin index breaks ties so equal runs keep a fixed order
    return sorted(records, key=lambda r: (r.field(position), r.index))


def connect_field(
    uf: UnionFind,
    records: Sequence[Record],
    position: int,
    policy: EmptinessPolicy,
) -> int:
    """Union every pair of records sharing a value at one field position.

    Args:
        uf: Union-find over record origin indices.
        records: Accepted records.
        position: Field position to compare.
        policy: Decides which value never links records.

    Returns:
        int: Number of unions issued.

    Notes:
        Records are sorted by the field so equal values sit next to each
        other. Only consecutive equal pairs are unioned; a run of k equal
        records is connected by its k - 1 links.
    """
    ordered = sort_by_field(records, position)
    unions = 0
    for prev, cur in zip(ordered, ordered[1:]):
        value = cur.field(position)
        if value == prev.field(position) and not policy.is_empty(value):
            uf.union(prev.index, cur.index)
            unions += 1
    return unions


def build_union_find(
    records: Sequence[Record],
    policy: EmptinessPolicy,
    field_order: FieldOrder = DEFAULT_FIELD_ORDER,
) -> UnionFind:
    uf = UnionFind(len(records))
    for position in field_order:
        unions = connect_field(uf, records, position, policy)
        logger.debug("Field %d: %d unions", position, unions)
    return uf


# ---------------- Stage 2: assemble ----------------
def assemble_groups(
    records: Sequence[Record], labels: Sequence[int], n_sets: int
) -> List[List[str]]:
    groups: List[List[str]] = [[] for _ in range(n_sets)]
    for r in sorted(records, key=lambda r: r.index):
        groups[labels[r.index]].append(r.render())
    return groups


def order_by_size(groups: List[List[str]]) -> List[List[str]]:
    # sorted() is stable with reverse=True, equal sizes keep label order
    return sorted(groups, key=len, reverse=True)


def group_records(
    records: Sequence[Record],
    policy: EmptinessPolicy,
    field_order: FieldOrder = DEFAULT_FIELD_ORDER,
) -> GroupingResult:
    uf = build_union_find(records, policy, field_order)
    labels = uf.partition_labels()
    groups = order_by_size(assemble_groups(records, labels, uf.n_sets))
    result = GroupingResult(groups=groups, labels=labels)
    logger.info(
        "Grouped %d lines into %d groups (%d with size over 1)",
        len(records),
        result.total_groups,
        result.groups_over_one,
    )
    return result
