"""
Base32 alphabets and character maps

An alphabet is the ordered list of 32 symbols used when encoding; a charmap is
the reverse lookup (character -> 5-bit value) used when decoding. Charmaps may
carry extra alias characters so that visually ambiguous input still decodes.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional


# Pad character; skipped when decoding, never emitted when encoding
PAD = "="

ALPHABET_SIZE = 32


class Base32Error(ValueError):
    """An error in base32 configuration or input"""

    class ErrorType(Enum):
        """Kinds of base32 errors"""
        INVALID_TYPE = "invalid_type"
        INVALID_ALPHABET = "invalid_alphabet"
        INVALID_CHARMAP = "invalid_charmap"
        INVALID_CHARACTER = "invalid_character"

    def __init__(self, error_type: ErrorType, message: str = ""):
        self.error_type = error_type
        super().__init__(f"{error_type.value}: {message}" if message else error_type.value)


def validate_alphabet(alphabet: str) -> str:
    """
    Check that an alphabet can be used for encoding

    Args:
        alphabet: Candidate alphabet

    Returns:
        The alphabet, unchanged

    Raises:
        Base32Error: If the alphabet is not 32 distinct characters
    """
    if not isinstance(alphabet, str):
        raise Base32Error(Base32Error.ErrorType.INVALID_ALPHABET,
                          f"alphabet must be a string, not {type(alphabet).__name__}")
    if len(alphabet) != ALPHABET_SIZE:
        raise Base32Error(Base32Error.ErrorType.INVALID_ALPHABET,
                          f"alphabet must have {ALPHABET_SIZE} characters, got {len(alphabet)}")
    if len(set(alphabet.upper())) != ALPHABET_SIZE:
        raise Base32Error(Base32Error.ErrorType.INVALID_ALPHABET,
                          "alphabet characters must be distinct (ignoring case)")
    if PAD in alphabet:
        raise Base32Error(Base32Error.ErrorType.INVALID_ALPHABET,
                          f"alphabet must not contain the pad character {PAD!r}")
    return alphabet


def validate_charmap(charmap: Mapping[str, int]) -> Mapping[str, int]:
    """Check a decoding map and return a read-only copy keyed by upper-case characters"""
    normalized: Dict[str, int] = {}
    for char, value in charmap.items():
        if not isinstance(char, str) or len(char) != 1:
            raise Base32Error(Base32Error.ErrorType.INVALID_CHARMAP,
                              f"charmap keys must be single characters, got {char!r}")
        if char == PAD:
            raise Base32Error(Base32Error.ErrorType.INVALID_CHARMAP,
                              f"charmap must not map the pad character {PAD!r}")
        # bool is an int subclass but never a meaningful symbol value
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < ALPHABET_SIZE:
            raise Base32Error(Base32Error.ErrorType.INVALID_CHARMAP,
                              f"charmap value for {char!r} must be in 0..31, got {value!r}")
        key = char.upper()
        if normalized.get(key, value) != value:
            raise Base32Error(Base32Error.ErrorType.INVALID_CHARMAP,
                              f"charmap maps {key!r} to both {normalized[key]} and {value}")
        normalized[key] = value
    return MappingProxyType(normalized)


def build_charmap(alphabet: str, overrides: Optional[Mapping[str, int]] = None) -> Mapping[str, int]:
    """
    Build the decoding map for an alphabet

    Every alphabet character maps to its index unless `overrides` already
    names it; overrides always win, which is how alias characters are added.

    Args:
        alphabet: 32-character encoding alphabet
        overrides: Extra or replacement character -> value entries

    Returns:
        Read-only mapping from upper-case character to 5-bit value
    """
    validate_alphabet(alphabet)
    mappings = dict(validate_charmap(overrides or {}))
    for i, char in enumerate(alphabet.upper()):
        if char not in mappings:
            mappings[char] = i
    return MappingProxyType(mappings)


@dataclass(frozen=True)
class Alphabet:
    """A named base32 variant: encoding symbols plus decoding map"""
    name: str
    symbols: str
    charmap: Mapping[str, int]

    @classmethod
    def create(cls, name: str, symbols: str,
               overrides: Optional[Mapping[str, int]] = None) -> 'Alphabet':
        return cls(name, symbols, build_charmap(symbols, overrides))


# RFC 4648, https://tools.ietf.org/html/rfc4648
# The digits 0 and 1 are not in this alphabet; they decode as the letters O and I.
RFC4648 = Alphabet.create("rfc4648", "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567", {"0": 14, "1": 8})

# Crockford, http://www.crockford.com/wrmg/base32.html
CROCKFORD = Alphabet.create("crockford", "0123456789ABCDEFGHJKMNPQRSTVWXYZ", {"O": 0, "I": 1, "L": 1})

# RFC 4648 "extended hex"
BASE32HEX = Alphabet.create("base32hex", "0123456789ABCDEFGHIJKLMNOPQRSTUV")

VARIANTS: Mapping[str, Alphabet] = MappingProxyType({
    a.name: a for a in (RFC4648, CROCKFORD, BASE32HEX)
})

DEFAULT = RFC4648


def get_variant(name: str) -> Alphabet:
    """Look up a standard variant by name (case-insensitive)"""
    variant = VARIANTS.get(name.lower()) if isinstance(name, str) else None
    if variant is None:
        raise Base32Error(Base32Error.ErrorType.INVALID_TYPE,
                          f"unknown base32 type {name!r}, expected one of {sorted(VARIANTS)}")
    return variant
