# playfair.py
# Playfair digraph cipher over the 25 amino-acid letters (J merged into I)

import logging
from functools import lru_cache
from typing import List, Sequence, Tuple

from codons import SENTINEL
from errors import KeyFormatError, LengthMismatchError, UnknownSymbolError

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"
FILLER = "X"


@lru_cache(maxsize=128)
def build_key_matrix(passphrase: str) -> str:
    """
    Build the 5x5 key matrix (row-major, 25 letters) from a passphrase.
    Letters of the passphrase come first in order of first appearance,
    followed by the rest of the alphabet. Any input yields a valid matrix.
    """
    key = passphrase.upper().replace("J", "I")
    key = "".join(ch for ch in key if ch in ALPHABET)
    return "".join(dict.fromkeys(key + ALPHABET))


def format_matrix(key: str) -> str:
    key = _check_key(key)
    return "\n".join(" ".join(key[r * 5:r * 5 + 5]) for r in range(5))


def _check_key(key: str) -> str:
    key = "".join(key).upper()
    if len(key) != 25 or len(set(key)) != 25:
        raise KeyFormatError(f"Key matrix must hold 25 unique letters, got {key!r}")
    return key


def insert_fillers(acids: str, ambig: Sequence[int]) -> Tuple[str, List[int]]:
    """
    Split identical letters that would share a digraph with FILLER and pad an
    odd tail. Every inserted FILLER gets a SENTINEL at the same index of the
    returned ambiguity vector.
    """
    if len(acids) != len(ambig):
        raise LengthMismatchError(f"{len(acids)} acids but {len(ambig)} ambiguity codes")
    letters = list(acids)
    codes = list(ambig)
    i = 1
    while i < len(letters):
        if letters[i] == letters[i - 1]:
            letters.insert(i, FILLER)
            codes.insert(i, SENTINEL)
            logger.debug("Inserted %s at index %d", FILLER, i)
        i += 2
    if len(letters) % 2 != 0:
        letters.append(FILLER)
        codes.append(SENTINEL)
        logger.debug("Appended %s to odd-length text", FILLER)
    return "".join(letters), codes


def _substitute(key: str, text: str, mode: int) -> str:
    """Apply the Playfair rules pairwise; mode=1 encrypts, mode=-1 decrypts."""
    position = {ch: i for i, ch in enumerate(key)}
    out = []
    for k in range(0, len(text), 2):
        pair = text[k:k + 2]
        for ch in pair:
            if ch not in position:
                raise UnknownSymbolError(f"Letter {ch!r} is not in the key matrix")
        i1, i2 = position[pair[0]], position[pair[1]]
        if i1 // 5 == i2 // 5:
            # same row
            j1 = i1 // 5 * 5 + (i1 % 5 + mode) % 5
            j2 = i2 // 5 * 5 + (i2 % 5 + mode) % 5
        elif (i1 - i2) % 5 == 0:
            # same column
            j1 = (i1 + 5 * mode) % 25
            j2 = (i2 + 5 * mode) % 25
        else:
            # rectangle
            j1 = i1 // 5 * 5 + i2 % 5
            j2 = i2 // 5 * 5 + i1 % 5
        out.append(key[j1] + key[j2])
    return "".join(out)


def encrypt(key: str, acids: str, ambig: Sequence[int]) -> Tuple[str, List[int]]:
    """Encrypt acid letters; returns the cipher letters and the grown ambiguity vector."""
    key = _check_key(key)
    text, codes = insert_fillers(acids.upper(), ambig)
    return _substitute(key, text, 1), codes


def decrypt(key: str, cipher: str) -> str:
    key = _check_key(key)
    text = cipher.upper()
    if len(text) % 2 != 0:
        raise LengthMismatchError(f"Cipher text has odd length {len(text)}")
    return _substitute(key, text, -1)


def sanitize(acids: str, ambig: Sequence[int]) -> Tuple[str, List[int]]:
    """Remove filler letters (marked by SENTINEL codes) from decrypted acids and their codes."""
    if len(acids) != len(ambig):
        raise LengthMismatchError(f"{len(acids)} decrypted acids but {len(ambig)} ambiguity codes")
    kept = [(acid, code) for acid, code in zip(acids, ambig) if code != SENTINEL]
    logger.debug("Removed %d filler letter(s)", len(acids) - len(kept))
    return "".join(acid for acid, _ in kept), [code for _, code in kept]
