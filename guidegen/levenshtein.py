"""Levenshtein distance between two short strings (anchor names)."""


def distance(a: str, b: str) -> int:
    """Return the minimum number of insertions, deletions and substitutions
    needed to turn ``a`` into ``b``."""
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        table[i][0] = i
    for j in range(n + 1):
        table[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,         # deletion
                table[i][j - 1] + 1,         # insertion
                table[i - 1][j - 1] + cost,  # substitution
            )

    return table[m][n]
