"""Tests for the stage fields shown by the GUI (no window is opened)."""
import pytest

pytest.importorskip("ttkbootstrap")

from gui_playfair_dna import (  # noqa: E402
    DECRYPT_FIELDS,
    ENCRYPT_FIELDS,
    decrypt_fields,
    encrypt_fields,
    on_modified,
)
from playfair_dna import build_key_matrix, encrypt_text  # noqa: E402


def test_encrypt_fields():
    fields = encrypt_fields("PLAYFAIRDNA", "HELLO")
    assert list(fields) == ENCRYPT_FIELDS
    assert fields["Cipher"] == encrypt_text(build_key_matrix("PLAYFAIRDNA"), "HELLO")
    assert fields["Key matrix"].splitlines()[0] == "P L A Y F"
    assert fields["Binary"].split()[0] == "01001000"


def test_decrypt_fields_round_trip():
    cipher = encrypt_fields("key", "HELLO", ambig_first=False, encoding="utf-16-be")["Cipher"]
    fields = decrypt_fields("key", cipher, ambig_first=False, encoding="utf-16-be")
    assert list(fields) == DECRYPT_FIELDS
    assert fields["Plain text"] == "HELLO "


def test_decrypt_fields_error_is_shown():
    fields = decrypt_fields("key", "AUGC")
    assert fields["Plain text"].startswith("wrong format")
    assert fields["DNA"] == ""


def test_decrypt_fields_empty_cipher():
    fields = decrypt_fields("key", "   ")
    assert fields["Plain text"] == ""
    assert fields["Key matrix"] != ""


def test_encrypt_fields_unencodable_text():
    fields = encrypt_fields("key", "a\udcff")
    assert fields["Cipher"].startswith("error:")


class _TextStub:
    """Stands in for a Text widget's modified flag."""

    def __init__(self, modified):
        self.modified = modified

    def edit_modified(self, value=None):
        if value is None:
            return self.modified
        self.modified = value


def test_on_modified_recomputes_and_resets_flag():
    calls = []
    widget = _TextStub(True)
    on_modified(widget, lambda: calls.append(1))
    assert calls == [1]
    assert widget.modified is False


def test_on_modified_ignores_flag_reset_event():
    # resetting the flag fires <<Modified>> once more with the flag cleared
    calls = []
    on_modified(_TextStub(False), lambda: calls.append(1))
    assert calls == []
