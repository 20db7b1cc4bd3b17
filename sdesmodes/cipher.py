"""The block cipher interface used by the modes of operation."""

from abc import ABC, abstractmethod

__all__ = ["BlockCipher", "split_blocks"]


class BlockCipher(ABC):
    """A cipher that maps bit-string blocks of ``block_size`` bits to blocks."""

    block_size: int

    @abstractmethod
    def encrypt(self, block: str) -> str:
        """Encrypt a single block."""

    @abstractmethod
    def decrypt(self, block: str) -> str:
        """Decrypt a single block."""


def split_blocks(text: str, size: int) -> list[str]:
    """Split ``text`` into consecutive blocks of exactly ``size`` characters."""
    if size <= 0:
        raise ValueError("block size must be positive")
    if len(text) % size:
        raise ValueError(
            f"text length {len(text)} is not a multiple of the block size {size}"
        )
    return [text[start:start + size] for start in range(0, len(text), size)]