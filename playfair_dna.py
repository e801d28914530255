#!/usr/bin/env python3
# playfair_dna.py
# Text ⇄ nucleotides ⇄ amino acids ⇄ Playfair cipher ⇄ cipher string
# Encrypt: text → bytes → RNA → acids (+ambiguity) → Playfair → RNA → "AMBIG-DATA"

import argparse
import logging
import sys
from typing import List, NamedTuple, Optional

from cipher_string import ambig_to_string, join_cipher, split_cipher
from codons import (
    ENCODINGS,
    acids_to_dna,
    binary_to_dna,
    binary_to_text,
    dna_to_acids,
    dna_to_binary,
    pad_length,
    text_to_binary,
)
from errors import LengthMismatchError, PlayfairDNAError
import playfair
from playfair import build_key_matrix, format_matrix

logger = logging.getLogger(__name__)

__all__ = [
    "ENCODINGS",
    "Trace",
    "build_key_matrix",
    "decrypt_text",
    "decrypt_trace",
    "encrypt_text",
    "encrypt_trace",
    "format_binary",
    "pad_length",
]


class Trace(NamedTuple):
    """Every intermediate stage of one encrypt or decrypt call."""
    key: str
    binary: bytes
    dna: str
    acids: str
    ambig: List[int]
    cipher_acids: str
    cipher_dna: str
    result: str


def format_binary(data: bytes) -> str:
    return " ".join(f"{byte:08b}" for byte in data)


def encrypt_trace(matrix: str, plaintext: str, encoding: str = "utf-8",
                  ambig_first: bool = True) -> Trace:
    binary = text_to_binary(plaintext, encoding)
    dna = binary_to_dna(binary)
    acids, ambig = dna_to_acids(dna)
    cipher_acids, ambig = playfair.encrypt(matrix, acids, ambig)
    # cipher letters use their code-0 codon; real codes travel in the ambiguity segment
    cipher_dna = acids_to_dna(cipher_acids, [0] * len(cipher_acids))
    cipher = join_cipher(cipher_dna, ambig, ambig_first)
    logger.debug("Encrypted %d byte(s) into %d acid(s)", len(binary), len(cipher_acids))
    return Trace(matrix, binary, dna, acids, ambig, cipher_acids, cipher_dna, cipher)


def decrypt_trace(matrix: str, cipher: str, ambig_first: bool = True,
                  encoding: str = "utf-8") -> Trace:
    cipher_dna, ambig = split_cipher(cipher, ambig_first)
    if len(cipher_dna) != len(ambig) * 3:
        raise LengthMismatchError(
            f"{len(cipher_dna)} nucleotides do not match {len(ambig)} ambiguity codes"
        )
    cipher_acids, _ = dna_to_acids(cipher_dna)
    padded_acids = playfair.decrypt(matrix, cipher_acids)
    acids, codes = playfair.sanitize(padded_acids, ambig)
    dna = acids_to_dna(acids, codes)
    binary = dna_to_binary(dna)
    text = binary_to_text(binary, encoding)
    logger.debug("Decrypted %d acid(s) into %d byte(s)", len(cipher_acids), len(binary))
    return Trace(matrix, binary, dna, acids, ambig, cipher_acids, cipher_dna, text)


def encrypt_text(matrix: str, plaintext: str, encoding: str = "utf-8",
                 ambig_first: bool = True) -> str:
    """
    Encrypt plaintext with a key matrix from build_key_matrix.
    The text is padded with spaces to a whole number of codons first
    (see pad_length), so decrypt_text returns it with those spaces.
    """
    return encrypt_trace(matrix, plaintext, encoding, ambig_first).result


def decrypt_text(matrix: str, cipher: str, ambig_first: bool = True,
                 encoding: str = "utf-8") -> str:
    """
    Decrypt a cipher string. ambig_first and encoding must match the values
    used to encrypt. Raises a PlayfairDNAError subclass on malformed input.
    """
    return decrypt_trace(matrix, cipher, ambig_first, encoding).result


def print_trace(trace: Trace, out=None) -> None:
    out = out or sys.stdout
    rows = [
        ("Key matrix", trace.key),
        ("Binary", format_binary(trace.binary)),
        ("DNA", trace.dna),
        ("Acids", trace.acids),
        ("Ambiguity", ambig_to_string(trace.ambig)),
        ("Cipher acids", trace.cipher_acids),
        ("Cipher DNA", trace.cipher_dna),
        ("Result", trace.result),
    ]
    for name, value in rows:
        print(f"{name + ':':<14}{value}", file=out)


# --------- CLI ----------
def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--key", default="", help="Passphrase for the Playfair key matrix")
    p.add_argument("--encoding", choices=ENCODINGS, default="utf-8", help="Text encoding")
    p.add_argument("--ambig-after", action="store_true",
                   help="Ambiguity segment follows the data segment (default: before)")
    p.add_argument("--trace", action="store_true", help="Print every intermediate stage")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Text ⇄ DNA Playfair cipher")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=False)

    pe = sub.add_parser("encrypt", help="Encrypt text")
    pe.add_argument("text", help="Text to encrypt")
    _add_common(pe)

    pd = sub.add_parser("decrypt", help="Decrypt a cipher string")
    pd.add_argument("cipher", help="Cipher string (e.g. AUGN-CCAGGU...)")
    _add_common(pd)

    pm = sub.add_parser("matrix", help="Show the key matrix for a passphrase")
    pm.add_argument("--key", default="", help="Passphrase for the Playfair key matrix")
    return parser


def _interactive() -> int:
    print("No arguments provided. Running interactive mode.")
    try:
        while True:
            print("\nOptions: (e)ncrypt, (d)ecrypt, (m)atrix, (q)uit")
            choice = input("Choose: ").strip().lower()
            if not choice:
                continue
            if choice[0] == "q":
                print("Exiting.")
                break
            if choice[0] not in "edm":
                print("Unknown option.")
                continue
            matrix = build_key_matrix(input("Key (leave empty for default): "))
            if choice[0] == "m":
                print(format_matrix(matrix))
            elif choice[0] == "e":
                txt = input("Enter text to encrypt: ")
                try:
                    print("Cipher:", encrypt_text(matrix, txt))
                except PlayfairDNAError as ex:
                    print("Encrypt error:", ex)
            else:
                s = input("Enter cipher string: ")
                try:
                    print("Decrypted text:", repr(decrypt_text(matrix, s)))
                except PlayfairDNAError as ex:
                    print("Decode error:", ex)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted. Exiting.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd is None:
        return _interactive()

    matrix = build_key_matrix(args.key)
    if args.cmd == "matrix":
        print(format_matrix(matrix))
        return 0

    ambig_first = not args.ambig_after
    try:
        if args.cmd == "encrypt":
            trace = encrypt_trace(matrix, args.text, args.encoding, ambig_first)
        else:
            trace = decrypt_trace(matrix, args.cipher, ambig_first, args.encoding)
    except PlayfairDNAError as e:
        print(f"{args.cmd.capitalize()} error: {e}", file=sys.stderr)
        return 1

    if args.trace:
        print_trace(trace)
    else:
        print(trace.result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
