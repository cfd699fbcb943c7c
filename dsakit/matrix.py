"""Grid helpers: row sums, spiral order, minimum-effort paths and Pascal's triangle."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

Grid = Sequence[Sequence[int]]

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def row_sums(grid: Grid) -> list[int]:
    """Return the sum of each row of ``grid``."""
    return [sum(row) for row in grid]


def largest_sum_row(grid: Grid) -> int:
    """Return the index of the first row with the largest sum."""
    sums = row_sums(grid)
    if not sums:
        raise ValueError("grid has no rows")
    return max(range(len(sums)), key=sums.__getitem__)


def spiral_order(grid: Grid) -> list[int]:
    """Return the items of ``grid`` read clockwise from the outside in."""
    if not grid or not grid[0]:
        return []
    result: list[int] = []
    top, bottom = 0, len(grid) - 1
    left, right = 0, len(grid[0]) - 1
    while top <= bottom and left <= right:
        result.extend(grid[top][left : right + 1])
        top += 1
        result.extend(grid[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(reversed(grid[bottom][left : right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(grid[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def minimum_effort_path(heights: Grid) -> int:
    """Return the least possible largest height step on a path from the top-left to the bottom-right cell."""
    if not heights or not heights[0]:
        raise ValueError("heights must be a non-empty grid")
    rows, cols = len(heights), len(heights[0])
    best = [[float("inf")] * cols for _ in range(rows)]
    best[0][0] = 0
    queue: list[tuple[int, int, int]] = [(0, 0, 0)]
    while queue:
        effort, r, c = heapq.heappop(queue)
        if effort > best[r][c]:
            continue
        if (r, c) == (rows - 1, cols - 1):
            return effort
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                step = max(effort, abs(heights[r][c] - heights[nr][nc]))
                if step < best[nr][nc]:
                    best[nr][nc] = step
                    heapq.heappush(queue, (step, nr, nc))
    return int(best[rows - 1][cols - 1])


def pascal_row(n: int) -> list[int]:
    """Return the row of Pascal's triangle that has ``n`` entries."""
    if n < 1:
        raise ValueError("a row has at least one entry")
    row = [1]
    value = 1
    for i in range(1, n):
        value = value * (n - i) // i
        row.append(value)
    return row


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    return [pascal_row(i + 1) for i in range(num_rows)]