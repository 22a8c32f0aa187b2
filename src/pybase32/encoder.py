"""
Streaming base32 encoder

Bytes are 8 bits and symbols are 5, so a byte boundary only lines up with a
symbol boundary every 5 bytes / 8 symbols. Between writes the encoder keeps
the unconsumed low bits of the last byte in `carry`, already shifted into
the position they take in the next symbol.
"""

import logging
from typing import Iterable, List, Optional, Union

from .options import EncoderOptions

log = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]

# shift value at a fresh 5-byte group: the first symbol is the top 5 bits of
# the next byte, i.e. the byte shifted right by 3
INITIAL_SHIFT = 3


def _as_bytes(data: Union[Buffer, Iterable[int]]) -> bytes:
    if isinstance(data, str):
        raise TypeError("cannot base32-encode str, encode it to bytes first")
    if isinstance(data, (bytes, bytearray)):
        return data
    # memoryview and int iterables; out-of-range ints raise ValueError here
    return bytes(data)


class Encoder:
    """
    Incremental base32 encoder

    Call `write` any number of times, then `finalize` once to flush the
    remaining bits. Output does not depend on how the input was chunked.
    No `=` padding is emitted.

    An instance is not safe to share between threads.
    """

    def __init__(self, type: Optional[str] = None, *, alphabet: Optional[str] = None,
                 lc: bool = False, options: Optional[EncoderOptions] = None):
        if options is None:
            options = EncoderOptions(type=type, alphabet=alphabet, lc=lc)
        elif type is not None or alphabet is not None or lc:
            raise TypeError("pass either options or individual settings, not both")

        self.alphabet = options.resolve()
        self.buf: List[str] = []
        self.shift = INITIAL_SHIFT
        self.carry = 0

    def write(self, data: Union[Buffer, Iterable[int]]) -> 'Encoder':
        """
        Encode bytes, continuing from the previous state

        Args:
            data: Bytes to encode

        Returns:
            self, for chaining
        """
        alphabet = self.alphabet
        out = self.buf
        shift = self.shift
        carry = self.carry

        # 1: 00000 000
        # 2:          00 00000 0
        # 3:                    0000 0000
        # 4:                             0 00000 00
        # 5:                                       000 00000
        # 6:                                                00000 000
        # 7:                                                         00 00000 0
        for byte in _as_bytes(data):
            out.append(alphabet[(carry | (byte >> shift)) & 0x1F])

            # more than 5 bits of this byte left: a whole symbol fits
            if shift > 5:
                shift -= 5
                out.append(alphabet[(byte >> shift) & 0x1F])

            # the remaining low bits become the top of the next symbol
            shift = 5 - shift
            carry = (byte << shift) & 0xFF
            shift = 8 - shift

        self.shift = shift
        self.carry = carry
        return self

    def finalize(self, data: Optional[Union[Buffer, Iterable[int]]] = None) -> str:
        """
        Finish encoding

        Args:
            data: Optional final bytes to encode

        Returns:
            Everything encoded by this instance so far
        """
        if data:
            self.write(data)
        if self.shift != INITIAL_SHIFT:
            log.debug("flushing %d trailing bits", self.shift - INITIAL_SHIFT)
            self.buf.append(self.alphabet[self.carry & 0x1F])
            self.shift = INITIAL_SHIFT
            self.carry = 0
        return "".join(self.buf)
