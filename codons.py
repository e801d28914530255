#!/usr/bin/env python3
# codons.py
# Text ⇄ bytes ⇄ RNA nucleotides ⇄ amino-acid letters (with ambiguity codes)
# Mapping: 00→A, 01→U, 10→G, 11→C; N marks Playfair padding in ambiguity vectors

import logging
from typing import Dict, List, Tuple

import numpy as np

from errors import LengthMismatchError, TextDecodeError, TextEncodeError, UnknownSymbolError

logger = logging.getLogger(__name__)

# 2-bit value → base and inverse
BASES = ["A", "U", "G", "C"]
VALUE_TO_BASE = {v: b for v, b in enumerate(BASES)}
BASE_TO_VALUE = {b: v for v, b in VALUE_TO_BASE.items()}

# ambiguity codes use the same letters plus the padding sentinel
SENTINEL = 4
SENTINEL_BASE = "N"
AMBIG_TO_BASE = {**VALUE_TO_BASE, SENTINEL: SENTINEL_BASE}
BASE_TO_AMBIG = {b: v for v, b in AMBIG_TO_BASE.items()}

ENCODINGS = ("utf-8", "utf-16-be")
PAD_CHAR = " "

# Standard genetic code with the stop codons and the 5th/6th codons of
# L, S and R moved onto B, Z, O, U, X so all 25 Playfair letters are covered.
_GENETIC_CODE = {
    "UUU": "F", "UUC": "F", "UUA": "B", "UUG": "B",
    "UCU": "S", "UCC": "S", "UCA": "S", "UCG": "S",
    "UAU": "Y", "UAC": "Y", "UAA": "U", "UAG": "X",
    "UGU": "C", "UGC": "C", "UGA": "X", "UGG": "W",
    "CUU": "L", "CUC": "L", "CUA": "L", "CUG": "L",
    "CCU": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAU": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGU": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "AUU": "I", "AUC": "I", "AUA": "I", "AUG": "M",
    "ACU": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAU": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGU": "Z", "AGC": "Z", "AGA": "O", "AGG": "O",
    "GUU": "V", "GUC": "V", "GUA": "V", "GUG": "V",
    "GCU": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAU": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGU": "G", "GGC": "G", "GGA": "G", "GGG": "G",
}


def _canonical_codon_list() -> List[str]:
    """Return all 64 codons in the order of their 6-bit values 0..63."""
    codons = []
    for v in range(64):
        codons.append("".join(VALUE_TO_BASE[(v >> shift) & 0b11] for shift in (4, 2, 0)))
    return codons


def _rank_codons(code: Dict[str, str]) -> Dict[str, Tuple[str, int]]:
    """Attach to every codon its rank among the codons of the same acid."""
    seen: Dict[str, int] = {}
    table = {}
    for codon, acid in code.items():
        table[codon] = (acid, seen.get(acid, 0))
        seen[acid] = seen.get(acid, 0) + 1
    return table


# codon → (acid, ambiguity) and (acid, ambiguity) → codon
CODON_TABLE = _rank_codons(_GENETIC_CODE)
ACID_TABLE = {pair: codon for codon, pair in CODON_TABLE.items()}
ACIDS = "".join(sorted({acid for acid, _ in CODON_TABLE.values()}))


def _check_tables() -> None:
    if sorted(CODON_TABLE) != sorted(_canonical_codon_list()):
        raise ValueError("Codon table must hold each of the 64 codons once")
    if len(ACID_TABLE) != 64 or len(ACIDS) != 25:
        raise ValueError("Codon table must map onto 25 letters without collisions")
    if not all((acid, 0) in ACID_TABLE for acid in ACIDS):
        raise ValueError("Every acid needs a codon with ambiguity 0")
    if max(code for _, code in CODON_TABLE.values()) >= SENTINEL:
        raise ValueError("Acid has more codons than ambiguity codes")


_check_tables()

_SHIFTS = np.array([6, 4, 2, 0], dtype=np.uint8)
_BASE_ARRAY = np.array(BASES)


def _check_encoding(encoding: str) -> None:
    if encoding not in ENCODINGS:
        raise ValueError(f"Unsupported text encoding {encoding!r}, expected one of {ENCODINGS}")


def _encode(text: str, encoding: str) -> bytes:
    _check_encoding(encoding)
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as e:
        raise TextEncodeError(f"text cannot be encoded as {encoding} ({e})") from e


def pad_length(text: str, encoding: str = "utf-8") -> int:
    """Number of pad characters ``text_to_binary`` appends to ``text``."""
    data = _encode(text, encoding)
    if encoding == "utf-8":
        return -len(data) % 3
    return -(len(data) // 2) % 3


def text_to_binary(text: str, encoding: str = "utf-8") -> bytes:
    """
    Encode text to bytes and pad with spaces so the result splits into whole codons.
    utf-8 pads single bytes to a multiple of 3 bytes, utf-16-be pads 16-bit
    units to a multiple of 3 units.
    """
    return _encode(text + PAD_CHAR * pad_length(text, encoding), encoding)


def binary_to_text(data: bytes, encoding: str = "utf-8") -> str:
    _check_encoding(encoding)
    try:
        return bytes(data).decode(encoding)
    except UnicodeDecodeError as e:
        raise TextDecodeError(f"wrong binary format - check your key! ({e})") from e


def binary_to_dna(data: bytes) -> str:
    """Expand every byte into 4 nucleotides, most significant bit pair first."""
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    groups = (arr[:, None] >> _SHIFTS) & 0b11
    return "".join(_BASE_ARRAY[groups.ravel()])


def dna_to_binary(dna: str) -> bytes:
    if len(dna) % 4 != 0:
        raise LengthMismatchError(f"Nucleotide count {len(dna)} is not a multiple of 4")
    try:
        values = [BASE_TO_VALUE[base] for base in dna]
    except KeyError as e:
        raise UnknownSymbolError(f"Invalid nucleotide: {e.args[0]!r}") from None
    groups = np.array(values, dtype=np.uint8).reshape(-1, 4)
    return np.bitwise_or.reduce(groups << _SHIFTS, axis=1).astype(np.uint8).tobytes()


def dna_to_acids(dna: str) -> Tuple[str, List[int]]:
    """
    Translate nucleotides codon by codon into acid letters and ambiguity codes.
    A trailing partial codon is dropped.
    """
    remainder = len(dna) % 3
    if remainder:
        logger.warning("Dropping %d trailing nucleotide(s) that do not fill a codon", remainder)
    acids = []
    ambig = []
    for i in range(0, len(dna) - remainder, 3):
        codon = dna[i:i + 3]
        if codon not in CODON_TABLE:
            raise UnknownSymbolError(f"Invalid codon: {codon!r}")
        acid, code = CODON_TABLE[codon]
        acids.append(acid)
        ambig.append(code)
    return "".join(acids), ambig


def acids_to_dna(acids: str, ambig: List[int]) -> str:
    if len(acids) != len(ambig):
        raise LengthMismatchError(
            f"{len(acids)} acids but {len(ambig)} ambiguity codes"
        )
    dna = []
    for acid, code in zip(acids, ambig):
        codon = ACID_TABLE.get((acid, code))
        if codon is None:
            raise UnknownSymbolError(f"No codon for acid {acid!r} with ambiguity {code}")
        dna.append(codon)
    return "".join(dna)
