"""Dancing links for exact cover and minimum repeatable cover."""

import math


class DancingLinks:
    """A sparse 0/1 matrix with ``rows`` rows and ``columns`` columns (0-based)."""

    def __init__(self, rows, columns):
        if rows < 0 or columns < 0:
            raise ValueError("dimensions must be non-negative")
        self.rows, self.columns = rows, columns
        m = columns
        # Node 0 is the root; nodes 1..m are column headers.
        self._left = [m] + list(range(m))
        self._right = list(range(1, m + 1)) + [0]
        self._up = list(range(m + 1))
        self._down = list(range(m + 1))
        self._col = list(range(m + 1))
        self._row = [-1] * (m + 1)
        self._count = [0] * (m + 1)
        self._head = {}

    def add(self, row, column):
        """Set the cell at ``(row, column)`` to 1."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise ValueError(f"cell ({row}, {column}) out of range")
        c, node = column + 1, len(self._up)
        self._count[c] += 1
        self._col.append(c)
        self._row.append(row)
        self._down.append(self._down[c])
        self._up.append(c)
        self._up[self._down[c]] = node
        self._down[c] = node
        head = self._head.setdefault(row, node)
        if head == node:
            self._left.append(node)
            self._right.append(node)
        else:
            self._right.append(self._right[head])
            self._left.append(head)
            self._left[self._right[head]] = node
            self._right[head] = node

    @staticmethod
    def _walk(start, links):
        i = links[start]
        while i != start:
            yield i
            i = links[i]

    def _smallest_column(self):
        return min(self._walk(0, self._right), key=self._count.__getitem__)

    def _cover(self, c):
        up, down = self._up, self._down
        self._left[self._right[c]] = self._left[c]
        self._right[self._left[c]] = self._right[c]
        for i in self._walk(c, down):
            for j in self._walk(i, self._right):
                up[down[j]] = up[j]
                down[up[j]] = down[j]
                self._count[self._col[j]] -= 1

    def _uncover(self, c):
        up, down = self._up, self._down
        for i in self._walk(c, up):
            for j in self._walk(i, self._left):
                up[down[j]] = down[up[j]] = j
                self._count[self._col[j]] += 1
        self._left[self._right[c]] = self._right[self._left[c]] = c

    def _exact(self, chosen):
        if self._right[0] == 0:
            return True
        c = self._smallest_column()
        self._cover(c)
        found = False
        for i in self._walk(c, self._down):
            chosen.append(self._row[i])
            for j in self._walk(i, self._right):
                self._cover(self._col[j])
            found = self._exact(chosen)
            for j in self._walk(i, self._left):
                self._uncover(self._col[j])
            if found:
                break
            chosen.pop()
        self._uncover(c)
        return found

    def exact_cover(self):
        """Return sorted rows covering every column exactly once, or ``None``."""
        chosen = []
        return sorted(chosen) if self._exact(chosen) else None

    def _unlink_vertical(self, node):
        for i in self._walk(node, self._down):
            self._left[self._right[i]] = self._left[i]
            self._right[self._left[i]] = self._right[i]

    def _relink_vertical(self, node):
        for i in self._walk(node, self._up):
            self._left[self._right[i]] = self._right[self._left[i]] = i

    def _lower_bound(self):
        remaining = set(self._walk(0, self._right))
        bound = 0
        for c in self._walk(0, self._right):
            if c in remaining:
                bound += 1
                remaining.discard(c)
                for i in self._walk(c, self._down):
                    remaining.difference_update(self._col[j] for j in self._walk(i, self._right))
        return bound

    def _repeat(self, depth):
        if depth + self._lower_bound() >= self._best:
            return
        if self._right[0] == 0:
            self._best = depth
            return
        c = self._smallest_column()
        for i in self._walk(c, self._down):
            self._unlink_vertical(i)
            for j in self._walk(i, self._right):
                self._unlink_vertical(j)
            self._repeat(depth + 1)
            for j in self._walk(i, self._left):
                self._relink_vertical(j)
            self._relink_vertical(i)

    def min_repeat_cover(self):
        """Return the fewest rows covering every column at least once, or ``None``."""
        self._best = math.inf
        self._repeat(0)
        return None if self._best == math.inf else int(self._best)