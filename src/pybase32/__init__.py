"""
Streaming Base32 codec

Encodes and decodes the RFC 4648, Crockford and base32hex variants, as well
as custom alphabets and character maps. Encoder and Decoder accept input
incrementally; output is the same however the input is chunked.
"""

from .alphabets import (
    Alphabet,
    Base32Error,
    BASE32HEX,
    CROCKFORD,
    DEFAULT,
    PAD,
    RFC4648,
    VARIANTS,
    build_charmap,
    get_variant,
    validate_alphabet,
    validate_charmap,
)

from .options import (
    DecoderOptions,
    EncoderOptions,
)

from .encoder import Encoder

from .decoder import (
    DecodeError,
    Decoder,
)

from .base32 import (
    encode,
    decode,
)

__version__ = "0.1.0"

__all__ = [
    # Alphabets
    "Alphabet",
    "BASE32HEX",
    "CROCKFORD",
    "DEFAULT",
    "PAD",
    "RFC4648",
    "VARIANTS",
    "build_charmap",
    "get_variant",
    "validate_alphabet",
    "validate_charmap",

    # Configuration
    "DecoderOptions",
    "EncoderOptions",

    # Streaming codec
    "Encoder",
    "Decoder",

    # One-shot functions
    "encode",
    "decode",

    # Errors
    "Base32Error",
    "DecodeError",
]
