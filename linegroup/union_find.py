from typing import List


class UnionFind:
    def __init__(self, n: int):
        """Initialize the union–find data structure over indices 0..n-1.

        Creates two index-addressed lists:
        - parent: maps each index to its parent (or itself if it is a root)
        - rank: stores a heuristic depth used for efficient merging.
        """

        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self.n_sets = n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the two disjoint sets containing a and b.

        Args:
            a (int): First index.
            b (int): Second index.

        Notes:
            Applies union by rank to maintain shallow trees.
            If ranks are equal, the root of a becomes parent and its rank
            increases by one.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        rank_a = self.rank[ra]
        rank_b = self.rank[rb]
        if rank_a < rank_b:
            self.parent[ra] = rb
        elif rank_a > rank_b:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] = rank_a + 1
        self.n_sets -= 1

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def partition_labels(self) -> List[int]:
        """Return a dense set label for every index.

        Returns:
            list[int]: Label in [0, K) per index, K being the number of
            disjoint sets. Labels are handed out in the order roots are
            first met while scanning indices ascending, so the same union
            sequence always yields the same labelling.

        Notes:
            Also records K in ``n_sets``.
        """
        root_label = {}
        labels = []
        for i in range(len(self.parent)):
            root = self.find(i)
            if root not in root_label:
                root_label[root] = len(root_label)
            labels.append(root_label[root])
        self.n_sets = len(root_label)
        return labels

    def groups(self) -> List[List[int]]:
        """Return all disjoint sets, indexed by their dense label.

        Returns:
            list[list[int]]: Member indices of each set, ascending.
        """
        labels = self.partition_labels()
        out: List[List[int]] = [[] for _ in range(self.n_sets)]
        for i, label in enumerate(labels):
            out[label].append(i)
        return out
