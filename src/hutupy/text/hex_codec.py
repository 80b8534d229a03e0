"""Hex encoding of text."""

import binascii

def hex_encoding(s: str) -> str:
    """Encode the UTF-8 bytes of ``s`` as lowercase hex, two digits per byte.

    >>> hex_encoding("hello, world!")
    '68656c6c6f2c20776f726c6421'
    """
    return s.encode("utf-8").hex()

def hex_decoding(s: str) -> str:
    """Decode a hex string produced by :func:`hex_encoding`.

    Args:
        s: Hex digits, even length, either case

    Returns:
        Decoded text

    Raises:
        ValueError: odd length, non-hex digits, or bytes that are not UTF-8
    """
    try:
        raw = binascii.unhexlify(s)
    except ValueError as e:  # binascii.Error, or non-ASCII input
        raise ValueError(f"Invalid hex string {s!r}: {e}") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Hex string does not decode to UTF-8 text: {e}") from e
