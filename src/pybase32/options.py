"""
Encoder and decoder configuration

Options are resolved once, when an Encoder or Decoder is built, into the
alphabet string or charmap the state machine works from.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from .alphabets import (
    Alphabet, Base32Error, DEFAULT, get_variant, validate_alphabet, validate_charmap
)

log = logging.getLogger(__name__)


def _variant(type: Optional[str], explicit: bool) -> Optional[Alphabet]:
    """Resolve `type` to a variant; an unknown type is only fatal without an explicit table"""
    if type is None:
        return DEFAULT
    try:
        return get_variant(type)
    except Base32Error:
        if explicit:
            log.debug("ignoring unknown base32 type %r, explicit table given", type)
            return None
        raise


@dataclass(frozen=True)
class EncoderOptions:
    """
    Encoder configuration

    `type` selects a standard variant ("rfc4648", "crockford", "base32hex");
    `alphabet` replaces it with a custom 32-character alphabet; `lc` emits
    lower-case symbols (ignored when `alphabet` is given).
    """
    type: Optional[str] = None
    alphabet: Optional[str] = None
    lc: bool = False

    def resolve(self) -> str:
        """Return the alphabet to encode with"""
        variant = _variant(self.type, self.alphabet is not None)
        if self.alphabet is not None:
            log.debug("encoding with custom alphabet %r", self.alphabet)
            return validate_alphabet(self.alphabet)

        symbols = variant.symbols.lower() if self.lc else variant.symbols
        log.debug("encoding with %s alphabet%s", variant.name, " (lower case)" if self.lc else "")
        return symbols


@dataclass(frozen=True)
class DecoderOptions:
    """
    Decoder configuration

    `type` selects a standard variant; `charmap` replaces its character map.
    """
    type: Optional[str] = None
    charmap: Optional[Mapping[str, int]] = None

    def resolve(self) -> Mapping[str, int]:
        """Return the character map to decode with"""
        variant = _variant(self.type, self.charmap is not None)
        if self.charmap is not None:
            log.debug("decoding with custom charmap of %d entries", len(self.charmap))
            return validate_charmap(self.charmap)

        log.debug("decoding with %s charmap", variant.name)
        return variant.charmap
