"""Helpers for working with bit strings made of the characters '0' and '1'."""

from collections.abc import Sequence

__all__ = ["xor_bits", "permute", "rotate_left", "to_hex"]


def xor_bits(a: str, b: str) -> str:
    """Return the bitwise exclusive or of two bit strings of equal length."""
    if len(a) != len(b):
        raise ValueError(f"cannot xor bit strings of lengths {len(a)} and {len(b)}")
    return "".join("0" if x == y else "1" for x, y in zip(a, b))


def permute(bits: str, table: Sequence[int]) -> str:
    """Pick bits by the 1-based positions in ``table``, in table order."""
    if any(not 1 <= position <= len(bits) for position in table):
        raise ValueError(
            f"permutation table refers to positions outside 1..{len(bits)}"
        )
    return "".join(bits[position - 1] for position in table)


def rotate_left(bits: str) -> str:
    """Rotate a bit string left by one position."""
    return bits[1:] + bits[:1]


def to_hex(bits: str) -> str:
    """Render a bit string as upper-case hex, one digit per group of four bits."""
    return "".join(
        format(int(bits[start:start + 4], 2), "X") for start in range(0, len(bits), 4)
    )