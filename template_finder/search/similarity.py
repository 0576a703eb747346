from __future__ import annotations

SIMILARITY_THRESHOLD = 0.6


def levenshtein_distance(a: str, b: str) -> int:
    # Keep the longer string on the column axis; the distance is symmetric.
    if len(a) < len(b):
        a, b = b, a

    rows = len(b) + 1
    cols = len(a) + 1
    matrix = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        matrix[i][0] = i
    for j in range(cols):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if b[i - 1] == a[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
    return matrix[rows - 1][cols - 1]


def similarity(a: str, b: str) -> float:
    """
    Normalized edit similarity in [0, 1].

    1 - distance / max(len(a), len(b)). Two empty strings count as identical
    and return 1.0.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def is_match(a: str, b: str) -> bool:
    return similarity(a, b) > SIMILARITY_THRESHOLD
