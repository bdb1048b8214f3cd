from collections import deque

# Tile codes duplicated lightly for test independence.
WALL = 0
FLOOR = 1
CONNECTOR = 2


def open_cells(rows):
    """Set of (r, c) non-wall cells from a list of tile rows."""
    return {(r, c) for r, row in enumerate(rows) for c, t in enumerate(row) if t != WALL}


def bfs_reachable(rows, start):
    """Return set of (r, c) non-wall cells reachable from start."""
    if start is None:
        return set()
    h = len(rows)
    w = len(rows[0])
    sr, sc = start
    if rows[sr][sc] == WALL:
        return set()
    q = deque([start])
    vis = {start}
    while q:
        r, c = q.popleft()
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < h and 0 <= nc < w and (nr, nc) not in vis and rows[nr][nc] != WALL:
                vis.add((nr, nc))
                q.append((nr, nc))
    return vis


def exits(rows, r, c):
    h = len(rows)
    w = len(rows[0])
    n = 0
    for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < h and 0 <= nc < w and rows[nr][nc] != WALL:
            n += 1
    return n


def dead_end_cells(rows):
    return [(r, c) for r, c in open_cells(rows) if exits(rows, r, c) == 1]


def edge_count(rows):
    """Number of orthogonally adjacent non-wall pairs."""
    cells = open_cells(rows)
    return sum(1 for r, c in cells for nr, nc in ((r + 1, c), (r, c + 1)) if (nr, nc) in cells)
