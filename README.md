# sdesmodes

Simplified DES (S-DES), the 8-bit teaching variant of DES, with ECB and CBC
modes of operation. Keys, blocks and messages are strings of `0` and `1`
characters: a key is 10 bits, a block is 8 bits, and a message must be a whole
number of blocks.

## Install

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from sdesmodes.sdes import SDES
from sdesmodes.modes import ECB, CBC
from sdesmodes.bits import to_hex

cipher = SDES("1010000010", debug=False)

ecb = ECB(cipher)
ciphertext = ecb.encrypt("1001011100101100")
assert ecb.decrypt(ciphertext) == "1001011100101100"

cbc = CBC(cipher, "10101010")
ciphertext = cbc.encrypt("1001011100101100")
print(ciphertext, to_hex(ciphertext))
assert cbc.decrypt(ciphertext) == "1001011100101100"
```

What the modules offer:

- `sdesmodes.sdes`: `SDES(key, debug=False)` with `encrypt(block)`,
  `decrypt(block)` and `round_function(half, subkey)` (the Feistel function F
  on a 4-bit half), plus `derive_subkeys(key)`, which returns the two 8-bit
  round subkeys for a 10-bit key. With `debug=True`, `SDES` prints the key and
  subkeys when created and every intermediate step of each block it encrypts
  or decrypts.
- `sdesmodes.modes`: `ECB(cipher)` and `CBC(cipher, iv)`, each with
  `encrypt(plaintext)` and `decrypt(ciphertext)`.
- `sdesmodes.cipher`: the abstract base class `BlockCipher` (a `block_size`
  attribute and `encrypt`/`decrypt` of one block) and `split_blocks(text, size)`.
  Any `BlockCipher` subclass can be given to the modes in place of `SDES`.
- `sdesmodes.bits`: bit-string helpers `xor_bits(a, b)`, `permute(bits, table)`
  (1-based positions), `rotate_left(bits)` and `to_hex(bits)` (upper-case, one
  digit per four bits).

Malformed input raises `ValueError`: a key that is not 10 bits, a block that is
not 8 bits, a message whose length is not a multiple of the block size, an IV
whose length does not match the block, or a permutation table that points
outside the bit string.

## Command line

The `sdesmodes` command reads its inputs from three files under `data/` in the
current directory, taking the first whitespace-separated token of each:

- `data/key`: the 10-bit key
- `data/plainText`: the message
- `data/iv`: the 8-bit initialization vector (read in both modes, used by CBC)

```
sdesmodes --ecb
sdesmodes --cbc
sdesmodes --cbc --debug
```

Exactly one of `--ecb` or `--cbc` must be given; otherwise the command prints a
message and exits with status 1. It prints the ciphertext in binary and
hexadecimal, for example `Encrypted text with ECB: <bits> -- <hex>`, then checks
that decrypting it gives the message back. `--debug` also prints the inputs,
the subkeys and every step of each block's encryption and decryption.

A missing file is read as an empty string, so a missing `data/key` ends in a
`ValueError` for the key length.

## What it does not do

The package works only on text made of `0` and `1` characters; it does not
encrypt bytes or files, and it does not pad messages to a whole number of
blocks. The command takes no file paths or keys as arguments: its inputs are
always the three files under `data/`, and it only prints the ciphertext,
writing nothing to disk.