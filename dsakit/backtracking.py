"""Backtracking searches: paths through a maze and a brute-force patch search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell of a square maze.

    Cells holding 1 are open, anything else is a wall. Paths use the letters
    U, D, L and R, never visit a cell twice, and come back sorted.
    """
    grid = [list(row) for row in maze]
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("maze must be square")
    if n == 0 or grid[0][0] != 1:
        return []

    visited = [[False] * n for _ in range(n)]
    paths: list[str] = []
    path: list[str] = []

    def is_safe(x: int, y: int) -> bool:
        return 0 <= x < n and 0 <= y < n and not visited[x][y] and grid[x][y] == 1

    def solve(x: int, y: int) -> None:
        if x == n - 1 and y == n - 1:
            paths.append("".join(path))
            return
        visited[x][y] = True
        for letter, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if is_safe(nx, ny):
                path.append(letter)
                solve(nx, ny)
                path.pop()
        visited[x][y] = False

    solve(0, 0)
    return sorted(paths)


def _covers(values: Iterable[int], n: int) -> bool:
    """Return whether subset sums of values reach every integer 1..n."""
    reach = 1
    limit = (1 << (n + 1)) - 1
    for value in values:
        reach = (reach | (reach << value)) & limit
    return reach == limit


def _include_first(candidates: list[int]) -> Iterator[list[int]]:
    """Yield subsets of candidates in the leaf order of an include-first search."""
    k = len(candidates)
    for mask in range((1 << k) - 1, -1, -1):
        yield [c for i, c in enumerate(candidates) if mask >> (k - 1 - i) & 1]


def min_patches(nums: Iterable[int], n: int) -> int:
    """Count patches needed so that subset sums of nums cover 1..n.

    Returns 0 when nums already cover 1..n. Otherwise the values in 1..n
    missing from nums are tried as patches, including each before excluding
    it, and the size of the first covering choice is returned.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("nums must not hold negative values")
    if _covers(values, n):
        return 0
    present = set(values)
    candidates = [i for i in range(1, n + 1) if i not in present]
    for chosen in _include_first(candidates):
        if _covers(values + chosen, n):
            return len(chosen)
    return 0