"""
Test cases for the alphabet registry and encoder/decoder configuration
"""

import os
import sys
import pytest

# Add the source directory to path to import the pybase32 package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pybase32 import (
    BASE32HEX, CROCKFORD, RFC4648, VARIANTS, Base32Error, Decoder, DecoderOptions,
    Encoder, EncoderOptions, build_charmap, get_variant, validate_alphabet, validate_charmap
)


ZBASE32 = "ybndrfg8ejkmcpqxot1uwisza345h769"


def test_build_charmap_assigns_indices():
    charmap = build_charmap(BASE32HEX.symbols)
    assert len(charmap) == 32
    for i, char in enumerate(BASE32HEX.symbols):
        assert charmap[char] == i


def test_build_charmap_overrides_win():
    overrides = {"A": 5, "!": 7}
    charmap = build_charmap(RFC4648.symbols, overrides)
    assert charmap["A"] == 5
    assert charmap["!"] == 7
    assert charmap["B"] == 1
    # the caller's mapping is left alone
    assert overrides == {"A": 5, "!": 7}


def test_build_charmap_upper_cases_keys():
    charmap = build_charmap(ZBASE32, {"l": 18})
    assert charmap["Y"] == 0
    assert charmap["9"] == 31
    assert charmap["L"] == 18
    assert "y" not in charmap


def test_charmaps_are_read_only():
    with pytest.raises(TypeError):
        RFC4648.charmap["A"] = 1
    with pytest.raises(TypeError):
        build_charmap(BASE32HEX.symbols)["0"] = 1


def test_rfc4648_table():
    assert RFC4648.symbols == "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
    assert RFC4648.charmap["A"] == 0
    assert RFC4648.charmap["7"] == 31
    # digits decode as the letters they look like
    assert RFC4648.charmap["0"] == RFC4648.charmap["O"] == 14
    assert RFC4648.charmap["1"] == RFC4648.charmap["I"] == 8
    assert len(RFC4648.charmap) == 34


def test_crockford_table():
    assert CROCKFORD.symbols == "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
    assert CROCKFORD.charmap["O"] == CROCKFORD.charmap["0"] == 0
    assert CROCKFORD.charmap["I"] == CROCKFORD.charmap["1"] == 1
    assert CROCKFORD.charmap["L"] == CROCKFORD.charmap["1"] == 1
    assert "U" not in CROCKFORD.charmap
    assert CROCKFORD.charmap["Z"] == 31


def test_base32hex_table():
    assert BASE32HEX.symbols == "0123456789ABCDEFGHIJKLMNOPQRSTUV"
    assert len(BASE32HEX.charmap) == 32
    assert BASE32HEX.charmap["V"] == 31


def test_get_variant():
    assert set(VARIANTS) == {"rfc4648", "crockford", "base32hex"}
    assert get_variant("crockford") is CROCKFORD
    assert get_variant("Base32Hex") is BASE32HEX

    with pytest.raises(Base32Error) as excinfo:
        get_variant("base64")
    assert excinfo.value.error_type == Base32Error.ErrorType.INVALID_TYPE


@pytest.mark.parametrize("alphabet", [
    "ABC",
    RFC4648.symbols + "8",
    "A" + RFC4648.symbols[1:-1] + "a",
    "=" + RFC4648.symbols[1:],
])
def test_validate_alphabet_rejects(alphabet):
    with pytest.raises(Base32Error) as excinfo:
        validate_alphabet(alphabet)
    assert excinfo.value.error_type == Base32Error.ErrorType.INVALID_ALPHABET


def test_validate_alphabet_rejects_non_string():
    with pytest.raises(Base32Error):
        validate_alphabet(list(RFC4648.symbols))


@pytest.mark.parametrize("charmap", [
    {"A": 32},
    {"A": -1},
    {"AB": 0},
    {"=": 0},
    {"A": True},
    {"A": "0"},
    {"a": 1, "A": 2},
])
def test_validate_charmap_rejects(charmap):
    with pytest.raises(Base32Error) as excinfo:
        validate_charmap(charmap)
    assert excinfo.value.error_type == Base32Error.ErrorType.INVALID_CHARMAP


def test_error_message():
    error = Base32Error(Base32Error.ErrorType.INVALID_TYPE, "nope")
    assert str(error) == "invalid_type: nope"
    assert isinstance(error, ValueError)


def test_default_variant_is_rfc4648():
    assert Encoder().alphabet == RFC4648.symbols
    assert Decoder().charmap is RFC4648.charmap


def test_unknown_type_is_rejected():
    with pytest.raises(Base32Error) as excinfo:
        Encoder("base64")
    assert excinfo.value.error_type == Base32Error.ErrorType.INVALID_TYPE

    with pytest.raises(Base32Error):
        Decoder("base64")


def test_unknown_type_with_explicit_table():
    assert Encoder("base64", alphabet=ZBASE32).alphabet == ZBASE32
    assert dict(Decoder("base64", charmap={"A": 1}).charmap) == {"A": 1}


def test_explicit_table_overrides_type():
    assert Encoder("crockford", alphabet=ZBASE32).alphabet == ZBASE32
    charmap = Decoder("crockford", charmap={"a": 3}).charmap
    assert dict(charmap) == {"A": 3}


def test_lower_case_alphabet():
    assert Encoder("crockford", lc=True).alphabet == CROCKFORD.symbols.lower()
    # lc only applies to the standard alphabets
    assert Encoder(alphabet=RFC4648.symbols, lc=True).alphabet == RFC4648.symbols


def test_invalid_custom_tables():
    with pytest.raises(Base32Error) as excinfo:
        Encoder(alphabet="0123456789")
    assert excinfo.value.error_type == Base32Error.ErrorType.INVALID_ALPHABET

    with pytest.raises(Base32Error) as excinfo:
        Decoder(charmap={"A": 99})
    assert excinfo.value.error_type == Base32Error.ErrorType.INVALID_CHARMAP


def test_options_objects():
    encoder = Encoder(options=EncoderOptions(type="base32hex", lc=True))
    assert encoder.alphabet == BASE32HEX.symbols.lower()

    decoder = Decoder(options=DecoderOptions(type="crockford"))
    assert decoder.charmap is CROCKFORD.charmap

    with pytest.raises(TypeError):
        Encoder("crockford", options=EncoderOptions())
    with pytest.raises(TypeError):
        Decoder(charmap={"A": 0}, options=DecoderOptions())


def test_validate_charmap_case_variants_agree():
    assert dict(validate_charmap({"a": 1, "A": 1})) == {"A": 1}
