"""Electronic codebook and cipher block chaining modes over a block cipher."""

from .bits import xor_bits
from .cipher import BlockCipher, split_blocks

__all__ = ["ECB", "CBC"]


class ECB:
    """Encrypt each block independently."""

    def __init__(self, cipher: BlockCipher) -> None:
        self.cipher = cipher

    def encrypt(self, plaintext: str) -> str:
        return "".join(
            self.cipher.encrypt(block)
            for block in split_blocks(plaintext, self.cipher.block_size)
        )

    def decrypt(self, ciphertext: str) -> str:
        return "".join(
            self.cipher.decrypt(block)
            for block in split_blocks(ciphertext, self.cipher.block_size)
        )


class CBC:
    """Chain blocks by xoring each plaintext block with the previous ciphertext."""

    def __init__(self, cipher: BlockCipher, iv: str) -> None:
        self.cipher = cipher
        self.iv = iv

    def encrypt(self, plaintext: str) -> str:
        previous = self.iv
        encrypted = []
        for block in split_blocks(plaintext, self.cipher.block_size):
            previous = self.cipher.encrypt(xor_bits(block, previous))
            encrypted.append(previous)
        return "".join(encrypted)

    def decrypt(self, ciphertext: str) -> str:
        previous = self.iv
        decrypted = []
        for block in split_blocks(ciphertext, self.cipher.block_size):
            decrypted.append(xor_bits(self.cipher.decrypt(block), previous))
            previous = block
        return "".join(decrypted)