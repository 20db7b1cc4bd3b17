import pytest

from sdesmodes.cipher import BlockCipher, split_blocks


class _Invert(BlockCipher):
    block_size = 4

    def encrypt(self, block):
        return "".join("1" if bit == "0" else "0" for bit in block)

    def decrypt(self, block):
        return self.encrypt(block)


def test_split_blocks_even():
    assert split_blocks("aabbcc", 2) == ["aa", "bb", "cc"]


def test_split_blocks_rejoins_to_original():
    text = "0110100111000011"
    blocks = split_blocks(text, 8)
    assert "".join(blocks) == text
    assert all(len(block) == 8 for block in blocks)


def test_split_blocks_empty():
    assert split_blocks("", 8) == []


def test_split_blocks_rejects_partial_block():
    with pytest.raises(ValueError):
        split_blocks("0101010", 8)


def test_split_blocks_rejects_bad_size():
    with pytest.raises(ValueError):
        split_blocks("0101", 0)


def test_block_cipher_is_abstract():
    with pytest.raises(TypeError):
        BlockCipher()


def test_subclass_round_trip():
    cipher = _Invert()
    text = "10100011"
    blocks = split_blocks(text, cipher.block_size)
    assert blocks == ["1010", "0011"]
    encrypted = [cipher.encrypt(block) for block in blocks]
    assert encrypted == ["0101", "1100"]
    assert "".join(cipher.decrypt(block) for block in encrypted) == text