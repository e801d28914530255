# errors.py
# Exceptions raised by the Playfair DNA pipeline stages


class PlayfairDNAError(ValueError):
    """Base class for every error raised by the pipeline."""


class KeyFormatError(PlayfairDNAError):
    """Key matrix is not exactly 25 unique letters."""


class LengthMismatchError(PlayfairDNAError):
    """Two sequences that must line up between stages do not."""


class UnknownSymbolError(PlayfairDNAError):
    """A character is outside the alphabet a stage expects."""


class TextDecodeError(PlayfairDNAError):
    """Decrypted bytes are not valid text (usually a wrong key)."""


class ParseError(PlayfairDNAError):
    """Cipher string does not split into exactly two segments."""


class TextEncodeError(PlayfairDNAError):
    """Plaintext cannot be encoded (for example a lone surrogate)."""
