"""Command line: encrypt data/plainText with data/key in ECB or CBC mode."""

import sys
from pathlib import Path

from .bits import to_hex
from .modes import CBC, ECB
from .sdes import SDES

__all__ = ["read_token", "main"]

DATA_DIR = Path("data")


def read_token(path) -> str:
    """Return the first whitespace-separated token of a file, or "" if there is none."""
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return ""
    tokens = text.split()
    return tokens[0] if tokens else ""


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    debug = "--debug" in args
    use_ecb = "--ecb" in args
    use_cbc = "--cbc" in args

    if not use_ecb and not use_cbc:
        print("Please specify --ecb or --cbc")
        return 1
    if use_ecb and use_cbc:
        print("Please specify only one of --ecb or --cbc")
        return 1

    key = read_token(DATA_DIR / "key")
    text = read_token(DATA_DIR / "plainText")
    iv = read_token(DATA_DIR / "iv")

    if debug:
        print(f"Key: {key}")
        print(f"Plaintext: {text}")
        print(f"IV: {iv}")

    cipher = SDES(key, debug)
    if use_ecb:
        mode, label = ECB(cipher), "ECB"
    else:
        mode, label = CBC(cipher, iv), "CBC"

    encrypted = mode.encrypt(text)
    print(f"Encrypted text with {label}: {encrypted} -- {to_hex(encrypted)}")
    if mode.decrypt(encrypted) != text:
        raise RuntimeError("decryption did not restore the plaintext")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())