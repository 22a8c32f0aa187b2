"""
Streaming base32 decoder

The mirror image of the encoder: each symbol contributes 5 bits, and a byte
is emitted whenever 8 have accumulated. Leftover bits wait in `carry`,
positioned high, until the next symbol (possibly in a later write).
"""

import logging
from typing import List, Mapping, Optional, Union

from .alphabets import Base32Error, PAD
from .options import DecoderOptions

log = logging.getLogger(__name__)

INITIAL_SHIFT = 8


class DecodeError(Base32Error):
    """A character that is neither in the charmap nor the pad character"""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(Base32Error.ErrorType.INVALID_CHARACTER,
                         f"{character!r} at position {position}")


def _as_text(data: Union[str, bytes, bytearray]) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        # one character per byte, so unknown bytes reach the charmap lookup
        return bytes(data).decode('latin-1')
    raise TypeError(f"cannot base32-decode {type(data).__name__}")


class Decoder:
    """
    Incremental base32 decoder

    Input is case-insensitive and `=` is skipped wherever it appears.
    A character missing from the charmap raises DecodeError; the failing
    write leaves the decoder exactly as it was before the call.

    An instance is not safe to share between threads.
    """

    def __init__(self, type: Optional[str] = None, *, charmap: Optional[Mapping[str, int]] = None,
                 options: Optional[DecoderOptions] = None):
        if options is None:
            options = DecoderOptions(type=type, charmap=charmap)
        elif type is not None or charmap is not None:
            raise TypeError("pass either options or individual settings, not both")

        self.charmap = options.resolve()
        self.buf = bytearray()
        self.shift = INITIAL_SHIFT
        self.carry = 0
        # characters consumed since the last finalize, for error positions
        self.position = 0

    def write(self, data: Union[str, bytes, bytearray]) -> 'Decoder':
        """
        Decode a string, continuing from the previous state

        Args:
            data: Base32 text to decode

        Returns:
            self, for chaining

        Raises:
            DecodeError: If data contains a character the charmap does not know
        """
        text = _as_text(data)
        charmap = self.charmap
        out: List[int] = []
        shift = self.shift
        carry = self.carry

        for i, char in enumerate(text):
            if char == PAD:
                continue

            symbol = charmap.get(char.upper())
            if symbol is None:
                error = DecodeError(char, self.position + i)
                log.debug("base32 decode failed: %s", error)
                raise error

            # 1: 00000 000
            # 2:          00 00000 0
            # 3:                    0000 0000
            # 4:                             0 00000 00
            # 5:                                       000 00000
            # 6:                                                00000 000
            # 7:                                                         00 00000 0
            shift -= 5
            if shift > 0:
                carry |= symbol << shift
            elif shift < 0:
                out.append(carry | (symbol >> -shift))
                shift += 8
                carry = (symbol << shift) & 0xFF
            else:
                out.append(carry | symbol)
                shift = INITIAL_SHIFT
                carry = 0

        # only commit once the whole chunk decoded
        self.buf.extend(out)
        self.shift = shift
        self.carry = carry
        self.position += len(text)
        return self

    def finalize(self, data: Optional[Union[str, bytes, bytearray]] = None) -> bytes:
        """
        Finish decoding

        Args:
            data: Optional final text to decode

        Returns:
            Everything decoded by this instance so far
        """
        if data:
            self.write(data)
        # zero fill bits from the encoder's last symbol are not a byte
        if self.shift != INITIAL_SHIFT and self.carry != 0:
            log.debug("flushing partial byte 0x%02x", self.carry)
            self.buf.append(self.carry)
        self.shift = INITIAL_SHIFT
        self.carry = 0
        self.position = 0
        return bytes(self.buf)
