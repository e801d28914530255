# cipher_string.py
# Cipher string: ciphered nucleotides and ambiguity vector joined by "-"

from typing import List, Sequence, Tuple

from codons import AMBIG_TO_BASE, BASE_TO_AMBIG, BASE_TO_VALUE
from errors import LengthMismatchError, ParseError, UnknownSymbolError

DELIMITER = "-"
_VALID = set(BASE_TO_AMBIG) | {DELIMITER}


def ambig_to_string(ambig: Sequence[int]) -> str:
    try:
        return "".join(AMBIG_TO_BASE[code] for code in ambig)
    except KeyError as e:
        raise UnknownSymbolError(f"Invalid ambiguity code: {e.args[0]!r}") from None


def join_cipher(dna: str, ambig: Sequence[int], ambig_first: bool = True) -> str:
    """
    Serialize ciphered nucleotides plus their ambiguity vector.
    With ambig_first the ambiguity segment comes before the delimiter.
    """
    if len(ambig) * 3 != len(dna):
        raise LengthMismatchError(
            f"{len(dna)} nucleotides do not match {len(ambig)} ambiguity codes"
        )
    ambig_part = ambig_to_string(ambig)
    if ambig_first:
        return ambig_part + DELIMITER + dna
    return dna + DELIMITER + ambig_part


def split_cipher(text: str, ambig_first: bool = True) -> Tuple[str, List[int]]:
    """
    Parse a cipher string into (nucleotides, ambiguity codes).
    Characters outside the cipher alphabet are ignored; exactly one
    delimiter must remain.
    """
    filtered = "".join(ch for ch in text if ch in _VALID)
    parts = filtered.split(DELIMITER)
    if len(parts) != 2:
        raise ParseError(
            f"Expected exactly one {DELIMITER!r} in cipher string, found {len(parts) - 1}"
        )
    ambig_part, dna = parts if ambig_first else parts[::-1]
    for base in dna:
        if base not in BASE_TO_VALUE:
            raise UnknownSymbolError(f"Invalid nucleotide in data segment: {base!r}")
    return dna, [BASE_TO_AMBIG[ch] for ch in ambig_part]
