"""
One-shot base32 encoding and decoding

Thin wrappers around a single-use Encoder / Decoder, for callers that hold
the whole input in memory.
"""

from typing import Iterable, Mapping, Optional, Union

from .decoder import Decoder
from .encoder import Buffer, Encoder


def encode(data: Union[Buffer, Iterable[int]], type: Optional[str] = None, *,
           alphabet: Optional[str] = None, lc: bool = False) -> str:
    """
    Encode bytes into a base32 string, without padding

    Args:
        data: Bytes to encode
        type: "rfc4648" (default), "crockford" or "base32hex"
        alphabet: Custom 32-character alphabet, overrides `type`
        lc: Emit lower-case symbols

    Returns:
        Base32 encoded string
    """
    return Encoder(type, alphabet=alphabet, lc=lc).finalize(data)


def decode(data: Union[str, bytes, bytearray], type: Optional[str] = None, *,
           charmap: Optional[Mapping[str, int]] = None) -> bytes:
    """
    Decode a base32 string into bytes

    Args:
        data: Base32 string to decode; case and `=` padding are ignored
        type: "rfc4648" (default), "crockford" or "base32hex"
        charmap: Custom character map, overrides `type`

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If the string contains a character outside the charmap
    """
    return Decoder(type, charmap=charmap).finalize(data)
