"""Simplified DES: a toy 8-bit block cipher with a 10-bit key."""

from .bits import permute, rotate_left, xor_bits
from .cipher import BlockCipher

__all__ = ["SDES", "derive_subkeys"]

P10 = (3, 5, 2, 7, 4, 10, 1, 9, 8, 6)
P8 = (6, 3, 7, 4, 8, 5, 10, 9)
IP = (2, 6, 3, 1, 4, 8, 5, 7)
IP_INV = (4, 1, 3, 5, 7, 2, 8, 6)
EP = (4, 1, 2, 3, 2, 3, 4, 1)
P4 = (2, 4, 3, 1)

S0 = (
    (1, 0, 3, 2),
    (3, 2, 1, 0),
    (0, 2, 1, 3),
    (3, 1, 3, 2),
)
S1 = (
    (0, 1, 2, 3),
    (2, 0, 1, 3),
    (3, 0, 1, 0),
    (2, 1, 0, 3),
)

KEY_SIZE = 10


def _require_length(bits: str, length: int, what: str) -> None:
    if len(bits) != length:
        raise ValueError(f"{what} must be {length} bits long, got {len(bits)}")


def derive_subkeys(key: str) -> tuple[str, str]:
    """Return the two 8-bit round subkeys derived from a 10-bit key."""
    _require_length(key, KEY_SIZE, "key")
    permuted = permute(key, P10)
    half = KEY_SIZE // 2
    left, right = rotate_left(permuted[:half]), rotate_left(permuted[half:])
    first = permute(left + right, P8)
    for _ in range(2):
        left, right = rotate_left(left), rotate_left(right)
    second = permute(left + right, P8)
    return first, second


def _sbox_lookup(sbox: tuple[tuple[int, ...], ...], bits: str) -> str:
    row = int(bits[0] + bits[3], 2)
    col = int(bits[1:3], 2)
    return format(sbox[row][col], "02b")


def _swap(bits: str) -> str:
    return bits[4:] + bits[:4]


class SDES(BlockCipher):
    """Simplified DES over 8-bit blocks given as strings of '0' and '1'."""

    block_size = 8

    def __init__(self, key: str, debug: bool = False) -> None:
        self.key = key
        self.debug = debug
        self.subkey1, self.subkey2 = derive_subkeys(key)
        if debug:
            print("-------")
            print(f"key: {key}")
            print(f"subkey1: {self.subkey1}")
            print(f"subkey2: {self.subkey2}")
            print("-------")

    def round_function(self, half: str, subkey: str) -> str:
        """The Feistel function F applied to a 4-bit half with an 8-bit subkey."""
        _require_length(half, 4, "half block")
        mixed = xor_bits(permute(half, EP), subkey)
        return permute(_sbox_lookup(S0, mixed[:4]) + _sbox_lookup(S1, mixed[4:]), P4)

    def _feistel(self, bits: str, subkey: str) -> str:
        left, right = bits[:4], bits[4:]
        return xor_bits(left, self.round_function(right, subkey)) + right

    def encrypt(self, block: str) -> str:
        _require_length(block, self.block_size, "block")
        permuted = permute(block, IP)
        after_first = self._feistel(permuted, self.subkey1)
        switched = _swap(after_first)
        after_second = self._feistel(switched, self.subkey2)
        encrypted = permute(after_second, IP_INV)
        if self.debug:
            print(f"\nEncrypting block: {block}")
            print(f"after application of identity permutation: {permuted}")
            print(f"after first round of feistel with subkey1: {after_first}")
            print(f"after switch function: {switched}")
            print(f"after second round of feistel with subkey2: {after_second}")
            print(f"after application of inverse of identity permutation: {encrypted}")
            print(f"encrypted text: {encrypted}")
            print()
        return encrypted

    def decrypt(self, block: str) -> str:
        _require_length(block, self.block_size, "block")
        permuted = permute(block, IP)
        after_first = self._feistel(permuted, self.subkey2)
        switched = _swap(after_first)
        after_second = self._feistel(switched, self.subkey1)
        decrypted = permute(after_second, IP_INV)
        if self.debug:
            print(f"\nDecrypting block: {block}")
            print(f"after application of identity permutation: {permuted}")
            print(f"after one round of feistel with subkey2: {after_first}")
            print(f"after switch function: {switched}")
            print(f"after second round of feistel with subkey1: {after_second}")
            print(f"decrypted text: {decrypted}")
            print()
        return decrypted