"""Tests for codons.py: lookup tables, byte/nucleotide codecs and codon translation."""
import logging

import pytest

import codons
from codons import (
    ACID_TABLE,
    ACIDS,
    CODON_TABLE,
    acids_to_dna,
    binary_to_dna,
    binary_to_text,
    dna_to_acids,
    dna_to_binary,
    pad_length,
    text_to_binary,
)
from errors import LengthMismatchError, TextDecodeError, TextEncodeError, UnknownSymbolError
from playfair import ALPHABET


class TestTables:
    def test_check_tables_passes(self):
        codons._check_tables()

    def test_all_64_codons_present(self):
        assert len(CODON_TABLE) == 64
        assert sorted(CODON_TABLE) == sorted(codons._canonical_codon_list())

    def test_acids_cover_playfair_alphabet(self):
        assert sorted(ACIDS) == sorted(ALPHABET)

    def test_codon_inverse_law(self):
        """Every codon survives codon → (acid, code) → codon."""
        for codon, (acid, code) in CODON_TABLE.items():
            assert ACID_TABLE[(acid, code)] == codon

    def test_ambiguity_codes_are_data_range(self):
        assert {code for _, code in CODON_TABLE.values()} == {0, 1, 2, 3}

    def test_every_acid_has_code_zero(self):
        for acid in ACIDS:
            assert (acid, 0) in ACID_TABLE

    def test_standard_code_examples(self):
        assert CODON_TABLE["AUG"] == ("M", 0)
        assert CODON_TABLE["GGG"] == ("G", 3)
        assert CODON_TABLE["UAG"] == ("X", 0)
        assert CODON_TABLE["UGA"] == ("X", 1)

    def test_canonical_order_follows_bit_values(self):
        canon = codons._canonical_codon_list()
        assert canon[0] == "AAA"
        assert canon[1] == "AAU"
        assert canon[63] == "CCC"


class TestByteCodec:
    def test_utf8_pad_to_three_bytes(self):
        assert text_to_binary("HELLO") == b"HELLO "
        assert text_to_binary("abc") == b"abc"
        assert text_to_binary("a") == b"a  "
        assert text_to_binary("") == b""

    def test_utf8_multibyte(self):
        # "é" is two bytes in UTF-8
        assert text_to_binary("é") == "é ".encode("utf-8")

    def test_utf16_pads_units(self):
        data = text_to_binary("HELLO", "utf-16-be")
        assert len(data) == 12
        assert data[-2:] == b"\x00\x20"
        assert data.decode("utf-16-be") == "HELLO "

    def test_pad_length(self):
        assert pad_length("HELLO") == 1
        assert pad_length("HELL") == 2
        assert pad_length("HEL") == 0
        assert pad_length("é") == 1
        assert pad_length("HELLO", "utf-16-be") == 1
        # a surrogate pair counts as two units
        assert pad_length("🧬", "utf-16-be") == 1

    def test_decode_valid(self):
        assert binary_to_text(b"HELLO ") == "HELLO "
        assert binary_to_text(b"\x00\x48", "utf-16-be") == "H"

    def test_decode_invalid_utf8(self):
        with pytest.raises(TextDecodeError):
            binary_to_text(b"\xff\xfe\xfd")

    def test_decode_truncated_utf16(self):
        with pytest.raises(TextDecodeError):
            binary_to_text(b"\x00\x48\x00", "utf-16-be")

    def test_lone_surrogate_is_typed_error(self):
        """Text that cannot be encoded (e.g. surrogateescape argv) raises TextEncodeError."""
        for encoding in codons.ENCODINGS:
            with pytest.raises(TextEncodeError):
                text_to_binary("a\udcff", encoding)
            with pytest.raises(TextEncodeError):
                pad_length("a\udcff", encoding)

    def test_unsupported_encoding(self):
        with pytest.raises(ValueError):
            text_to_binary("abc", "latin-1")


class TestNucleotideCodec:
    def test_byte_to_four_bases(self):
        # 0x48 = 01 00 10 00
        assert binary_to_dna(b"H") == "UAGA"
        assert binary_to_dna(b"\x00\xff") == "AAAACCCC"

    def test_empty(self):
        assert binary_to_dna(b"") == ""
        assert dna_to_binary("") == b""

    def test_inverse(self):
        data = bytes(range(256))
        assert dna_to_binary(binary_to_dna(data)) == data

    def test_unknown_symbol(self):
        with pytest.raises(UnknownSymbolError):
            dna_to_binary("AUGT")

    def test_sentinel_is_not_data(self):
        with pytest.raises(UnknownSymbolError):
            dna_to_binary("AUGN")

    def test_length_not_multiple_of_four(self):
        with pytest.raises(LengthMismatchError):
            dna_to_binary("AUG")


class TestCodonTranslator:
    def test_translate(self):
        acids, ambig = dna_to_acids("AUGGGGUAA")
        assert acids == "MGU"
        assert ambig == [0, 3, 0]

    def test_partial_codon_dropped(self, caplog):
        with caplog.at_level(logging.WARNING):
            acids, ambig = dna_to_acids("AUGGG")
        assert acids == "M"
        assert ambig == [0]
        assert "trailing" in caplog.text

    def test_invalid_codon(self):
        with pytest.raises(UnknownSymbolError):
            dna_to_acids("AUN")

    def test_back_to_dna(self):
        assert acids_to_dna("MGU", [0, 3, 0]) == "AUGGGGUAA"

    def test_all_codons_round_trip(self):
        dna = "".join(codons._canonical_codon_list())
        assert acids_to_dna(*dna_to_acids(dna)) == dna

    def test_missing_pair(self):
        # methionine has a single codon
        with pytest.raises(UnknownSymbolError):
            acids_to_dna("M", [1])

    def test_sentinel_never_resolves(self):
        with pytest.raises(UnknownSymbolError):
            acids_to_dna("X", [4])

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            acids_to_dna("MG", [0])
