"""Wrap text in ANSI colour and style escape sequences."""

from __future__ import annotations

from .unit import Color

_INIT = "\x1b["
_END = "m"
_HILIT = "1;"
_BLINK = "5;"
_RECOVER = "\x1b[0m"


def _finish(codes: list[str]) -> str:
    body = "".join(codes)
    if body.endswith(";"):
        body = body[:-1]
    return _INIT + body + _END


def ansi_print(
    text: str | None,
    fg: Color = Color.NOCHANGE,
    bg: Color = Color.NOCHANGE,
    hi: bool = False,
    blinking: bool = False,
) -> str:
    """Return ``text`` with the given colours and styles applied.

    Empty or missing text yields an empty string.
    """
    if not text:
        return ""
    codes: list[str] = []
    if hi:
        codes.append(_HILIT)
    if blinking:
        codes.append(_BLINK)
    if fg != Color.NOCHANGE:
        codes.append(f"3{int(fg)};")
    if bg != Color.NOCHANGE:
        codes.append(f"4{int(bg)};")
    return _finish(codes) + text + _RECOVER


def ansi_style(text: str | None, hi: bool = False, blinking: bool = False) -> str:
    """Return ``text`` with optional highlighting and blinking applied."""
    if not text:
        return ""
    prefix = ""
    if hi or blinking:
        codes: list[str] = []
        if hi:
            codes.append(_HILIT)
        if blinking:
            codes.append(_BLINK)
        prefix = _finish(codes)
    return prefix + text + _RECOVER