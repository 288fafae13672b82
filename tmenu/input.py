"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing, multi-byte UTF-8 characters, and SGR mouse
reports. Mouse reports and unbound escape sequences decode to their own
tokens so they can be ignored without being mistaken for Esc.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_CSI_LENGTH = 16
# Token for a fully consumed escape sequence with no binding (F-keys, Insert,
# modified arrows). Never confused with a lone ESC.
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": "CTRL_C",
    b"\x15": "CTRL_U",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_TILDE_KEYS: dict[bytes, str] = {
    b"1": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_utf8_char(fd: int, lead: bytes) -> str:
    data = lead
    for _ in range(_utf8_length(lead[0]) - 1):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        data += part
    return data.decode("utf-8", errors="replace")


def _read_sgr_mouse(fd: int) -> str:
    # SGR mouse: ESC [ < btn ; col ; row (M/m). Payload is consumed, not acted on.
    length = 0
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return UNKNOWN_KEY
        if part in {b"M", b"m"}:
            return "MOUSE"
        length += 1
        if length > 64:
            return UNKNOWN_KEY


def _read_csi_tail(fd: int, first: bytes) -> str:
    """Consume ``ESC [`` parameters through the final byte and name the key."""
    params = b""
    part: bytes | None = first
    while part is not None and 0x20 <= part[0] <= 0x3F:
        params += part
        if len(params) > MAX_CSI_LENGTH:
            return UNKNOWN_KEY
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if part is None or not 0x40 <= part[0] <= 0x7E:
        return UNKNOWN_KEY
    if part == b"~":
        return _TILDE_KEYS.get(params, UNKNOWN_KEY)
    if params:
        # Modifier parameters such as ESC [ 1 ; 5 A.
        return UNKNOWN_KEY
    return _CSI_FINAL_KEYS.get(part, UNKNOWN_KEY)


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Blocks until input arrives when ``timeout_ms`` is ``None``; otherwise
    returns ``""`` when nothing arrives in time or on end-of-file.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        if ch[0] >= 0x80:
            return _read_utf8_char(fd, ch)
        return ch.decode("ascii", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    introducer = seq
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return UNKNOWN_KEY
    if introducer == b"O":
        # SS3: one final byte (application-mode arrows, F1-F4).
        return _CSI_FINAL_KEYS.get(seq, UNKNOWN_KEY)
    if seq == b"<":
        return _read_sgr_mouse(fd)
    return _read_csi_tail(fd, seq)
