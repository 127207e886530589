"""Names and values of IP type-of-service and DiffServ codepoints."""

from __future__ import annotations

import re

__all__ = [
    "IPTOS_LOWDELAY",
    "IPTOS_THROUGHPUT",
    "IPTOS_RELIABILITY",
    "IPTOS_LOWCOST",
    "IPTOS_MINCOST",
    "QOS_NAMES",
    "parse_qos",
    "iptos_to_str",
]

IPTOS_LOWDELAY = 0x10
IPTOS_THROUGHPUT = 0x08
IPTOS_RELIABILITY = 0x04
IPTOS_LOWCOST = 0x02
IPTOS_MINCOST = IPTOS_LOWCOST

QOS_NAMES: tuple[tuple[str, int], ...] = (
    ("af11", 0x28),
    ("af12", 0x30),
    ("af13", 0x38),
    ("af21", 0x48),
    ("af22", 0x50),
    ("af23", 0x58),
    ("af31", 0x68),
    ("af32", 0x70),
    ("af33", 0x78),
    ("af41", 0x88),
    ("af42", 0x90),
    ("af43", 0x98),
    ("cs0", 0x00),
    ("cs1", 0x20),
    ("cs2", 0x40),
    ("cs3", 0x60),
    ("cs4", 0x80),
    ("cs5", 0xA0),
    ("cs6", 0xC0),
    ("cs7", 0xE0),
    ("ef", 0xB8),
    ("lowdelay", IPTOS_LOWDELAY),
    ("throughput", IPTOS_THROUGHPUT),
    ("reliability", IPTOS_RELIABILITY),
)
"""Known codepoint names with their TOS byte values, in lookup order."""

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

# An integer as accepted with automatic base detection: optional leading
# whitespace and sign, then hexadecimal, octal or decimal digits.
_INTEGER = re.compile(
    r"[ \t\n\v\f\r]*(?P<sign>[+-]?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))"
)


def _parse_integer(text: str) -> int | None:
    match = _INTEGER.fullmatch(text)
    if match is None:
        return None
    if match.group("hex") is not None:
        value = int(match.group("hex"), 16)
    elif match.group("oct") is not None:
        value = int(match.group("oct"), 8)
    else:
        value = int(match.group("dec"), 10)
    return -value if match.group("sign") == "-" else value


def parse_qos(text: str) -> int:
    """Return the TOS byte named by ``text``.

    ``text`` is a codepoint name (ASCII case-insensitive) or an integer in
    decimal, octal (leading ``0``) or hexadecimal (leading ``0x``) between
    0 and 255. Raises :class:`ValueError` for anything else.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    text = text.split("\0", 1)[0]
    wanted = text.translate(_ASCII_LOWER)
    for name, value in QOS_NAMES:
        if wanted == name:
            return value
    number = _parse_integer(text)
    if number is None or not 0 <= number <= 255:
        raise ValueError(f"invalid QoS value: {text!r}")
    return number


def iptos_to_str(iptos: int) -> str:
    """Return the name of a TOS byte, or its value as ``0xNN``.

    Values below 0 or above 64 are treated as 0.
    """
    if iptos < 0 or iptos > 64:
        iptos = 0
    for name, value in QOS_NAMES:
        if value == iptos:
            return name
    return f"0x{iptos:02x}"