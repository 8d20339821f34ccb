"""Levenshtein distance and normalized string similarity"""

from typing import List


def edit_distance(s1: str, s2: str) -> int:
    """
    Classic Levenshtein distance (insert, delete and substitute each cost 1).

    Uses the full (len1+1) x (len2+1) dynamic-programming matrix.
    """
    len1, len2 = len(s1), len(s2)

    matrix: List[List[int]] = [[0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(len1 + 1):
        matrix[i][0] = i
    for j in range(len2 + 1):
        matrix[0][j] = j

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost
            )

    return matrix[len1][len2]


def similarity(s1: str, s2: str) -> float:
    """
    Similarity in [0, 1]: 1 - edit_distance / max(len1, len2).

    Two empty strings are identical (1.0); one empty string against a
    non-empty one scores 0.0.
    """
    len1, len2 = len(s1), len(s2)

    if len1 == 0:
        return 1.0 if len2 == 0 else 0.0
    if len2 == 0:
        return 0.0

    return 1 - edit_distance(s1, s2) / max(len1, len2)
