# gui_playfair_dna.py
# Encrypt / decrypt panels that recompute every stage on every edit
import tkinter as tk
from tkinter.scrolledtext import ScrolledText
from typing import Dict, List, Tuple

import ttkbootstrap as tb
from ttkbootstrap.constants import INFO, SECONDARY

from cipher_string import ambig_to_string
from errors import PlayfairDNAError
from playfair import format_matrix
from playfair_dna import (
    ENCODINGS,
    Trace,
    build_key_matrix,
    decrypt_trace,
    encrypt_trace,
    format_binary,
)

ENCODING_LABELS = {"utf-8": "UTF-8", "utf-16-be": "UTF-16 (big endian)"}

ENCRYPT_FIELDS = ["Key matrix", "Binary", "DNA", "Acids", "Ambiguity",
                  "Acids after Playfair", "DNA after Playfair", "Cipher"]
DECRYPT_FIELDS = ["Key matrix", "DNA", "Ambiguity", "Acids",
                  "Acids after Playfair", "DNA after Playfair", "Binary", "Plain text"]


def _encrypt_values(trace: Trace) -> List[str]:
    return [format_matrix(trace.key), format_binary(trace.binary), trace.dna, trace.acids,
            ambig_to_string(trace.ambig), trace.cipher_acids, trace.cipher_dna, trace.result]


def _decrypt_values(trace: Trace) -> List[str]:
    return [format_matrix(trace.key), trace.cipher_dna, ambig_to_string(trace.ambig),
            trace.cipher_acids, trace.acids, trace.dna, format_binary(trace.binary), trace.result]


def encrypt_fields(passphrase: str, text: str, ambig_first: bool = True,
                   encoding: str = "utf-8") -> Dict[str, str]:
    fields = dict.fromkeys(ENCRYPT_FIELDS, "")
    matrix = build_key_matrix(passphrase)
    fields["Key matrix"] = format_matrix(matrix)
    try:
        trace = encrypt_trace(matrix, text, encoding, ambig_first)
    except PlayfairDNAError as e:
        fields["Cipher"] = f"error: {e}"
        return fields
    fields.update(zip(ENCRYPT_FIELDS, _encrypt_values(trace)))
    return fields


def decrypt_fields(passphrase: str, cipher: str, ambig_first: bool = True,
                   encoding: str = "utf-8") -> Dict[str, str]:
    fields = dict.fromkeys(DECRYPT_FIELDS, "")
    matrix = build_key_matrix(passphrase)
    fields["Key matrix"] = format_matrix(matrix)
    if not cipher.strip():
        return fields
    try:
        trace = decrypt_trace(matrix, cipher, ambig_first, encoding)
    except PlayfairDNAError as e:
        fields["Plain text"] = f"wrong format - check your key and settings!\n err: {e}"
        return fields
    fields.update(zip(DECRYPT_FIELDS, _decrypt_values(trace)))
    return fields


def on_modified(widget, command) -> None:
    """Recompute after any edit, including pastes; the flag must be reset for the next event."""
    if widget.edit_modified():
        widget.edit_modified(False)
        command()


class PlayfairDNAGUI:
    def __init__(self, root):
        self.root = root
        root.title("🧬 Playfair DNA")
        root.geometry("1024x760")
        tb.Label(root, text="Playfair DNA Cipher", font=("Segoe UI", 18, "bold"),
                 bootstyle=INFO).pack(pady=10)
        body = tb.Frame(root)
        body.pack(fill="both", expand=True, padx=10)
        body.columnconfigure(0, weight=1)
        body.columnconfigure(1, weight=1)
        self.encrypt_panel = self._make_panel(body, 0, "Encrypt", "Plain text:", ENCRYPT_FIELDS,
                                              self.encrypt)
        self.decrypt_panel = self._make_panel(body, 1, "Decrypt", "Cipher:", DECRYPT_FIELDS,
                                              self.decrypt)

    def _make_panel(self, parent, column: int, title: str, input_label: str,
                    field_names: List[str], command) -> dict:
        frame = tb.Labelframe(parent, text=title, padding=8)
        frame.grid(row=0, column=column, sticky="nsew", padx=5)

        panel = {
            "key": tk.StringVar(),
            "ambig_first": tk.BooleanVar(value=True),
            "encoding": tk.StringVar(value="utf-8"),
            "outputs": {},
        }

        ctrl = tb.Frame(frame)
        ctrl.pack(fill="x")
        tb.Label(ctrl, text="Ambiguity:").grid(row=0, column=0, sticky="w")
        for i, (label, value) in enumerate((("Before", True), ("After", False))):
            tb.Radiobutton(ctrl, text=label, variable=panel["ambig_first"], value=value,
                           command=command).grid(row=0, column=i + 1, padx=4)
        tb.Label(ctrl, text="Text format:").grid(row=1, column=0, sticky="w")
        for i, enc in enumerate(ENCODINGS):
            tb.Radiobutton(ctrl, text=ENCODING_LABELS[enc], variable=panel["encoding"], value=enc,
                           command=command).grid(row=1, column=i + 1, padx=4)

        tb.Label(frame, text="🔐 Key:").pack(anchor="w", pady=(6, 0))
        tb.Entry(frame, textvariable=panel["key"]).pack(fill="x")
        panel["key"].trace_add("write", lambda *_: command())

        tb.Label(frame, text=input_label).pack(anchor="w", pady=(6, 0))
        panel["input"] = ScrolledText(frame, height=3, font=("Consolas", 10))
        panel["input"].pack(fill="x")
        panel["input"].bind("<<Modified>>", lambda _event, w=panel["input"]: on_modified(w, command))

        for name in field_names:
            row = tb.Frame(frame)
            row.pack(fill="x", pady=(4, 0))
            tb.Label(row, text=name + ":").pack(side="left")
            tb.Button(row, text="copy", bootstyle=SECONDARY,
                      command=lambda n=name, p=panel: self.copy(p, n)).pack(side="right")
            box = ScrolledText(frame, height=2, font=("Consolas", 10), state="disabled")
            box.pack(fill="x")
            panel["outputs"][name] = box
        return panel

    @staticmethod
    def _read(panel: dict) -> Tuple[str, str, bool, str]:
        text = panel["input"].get("1.0", "end-1c")
        return panel["key"].get(), text, panel["ambig_first"].get(), panel["encoding"].get()

    @staticmethod
    def _show(panel: dict, fields: Dict[str, str]) -> None:
        for name, box in panel["outputs"].items():
            box.configure(state="normal")
            box.delete("1.0", "end")
            box.insert("1.0", fields.get(name, ""))
            box.configure(state="disabled")

    def encrypt(self):
        self._show(self.encrypt_panel, encrypt_fields(*self._read(self.encrypt_panel)))

    def decrypt(self):
        self._show(self.decrypt_panel, decrypt_fields(*self._read(self.decrypt_panel)))

    def copy(self, panel: dict, name: str):
        self.root.clipboard_clear()
        self.root.clipboard_append(panel["outputs"][name].get("1.0", "end-1c"))


def main():
    root = tb.Window(themename="cyborg")
    app = PlayfairDNAGUI(root)
    app.encrypt()
    app.decrypt()
    root.mainloop()


if __name__ == "__main__":
    main()
