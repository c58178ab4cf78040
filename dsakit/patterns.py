"""Text patterns of stars and digits, each returned as a list of lines."""

from __future__ import annotations


def rectangle(n: int) -> list[str]:
    """Return ``n`` rows of four stars."""
    return ["****" for _ in range(n)]


def right_triangle(n: int) -> list[str]:
    """Return a left-aligned triangle of stars, growing by one per row."""
    return ["*" * i for i in range(1, n + 1)]


def number_triangle(n: int) -> list[str]:
    """Return rows counting 1..i for each row i."""
    return ["".join(str(j) for j in range(1, i + 1)) for i in range(1, n + 1)]


def repeated_number_triangle(n: int) -> list[str]:
    """Return rows where row i repeats the number i, i times."""
    return [str(i) * i for i in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Return a left-aligned triangle of stars, shrinking by one per row."""
    return ["*" * (n - i + 1) for i in range(1, n + 1)]


def inverted_number_triangle(n: int) -> list[str]:
    """Return rows counting from 1, each one shorter than the last."""
    return [
        "".join(str(j) for j in range(1, n - i + 2)) for i in range(1, n + 1)
    ]


def pyramid(n: int) -> list[str]:
    """Return a centred pyramid of stars with ``n`` rows."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def inverted_pyramid(n: int) -> list[str]:
    """Return a centred, upside-down pyramid of stars with ``n`` rows."""
    return [" " * k + "*" * (2 * (n - k) - 1) for k in range(n)]


def diamond(n: int) -> list[str]:
    """Return a pyramid followed by an inverted pyramid."""
    return pyramid(n) + inverted_pyramid(n)


def arrow(n: int) -> list[str]:
    """Return a triangle growing to ``n`` stars and shrinking back to one."""
    return right_triangle(n) + inverted_triangle(n)[1:]


def binary_triangle(n: int) -> list[str]:
    """Return rows of alternating 1 and 0, each row starting with 1."""
    return [
        " ".join("1" if j & 1 else "0" for j in range(1, i + 1))
        for i in range(1, n + 1)
    ]