"""Defaults, limits and protocol constants for throughput tests."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "IperfMode",
    "PORT",
    "UDP_RATE",
    "OMIT",
    "DURATION",
    "US_TO_NS",
    "SEC_TO_US",
    "SEC_TO_NS",
    "MAX_RESULT_STRING",
    "UDP_BUFFER_EXTRA",
    "MB",
    "MAX_TCP_BUFFER",
    "MAX_BLOCKSIZE",
    "MIN_UDP_BLOCKSIZE",
    "MAX_UDP_BLOCKSIZE",
    "MIN_INTERVAL",
    "MAX_INTERVAL",
    "MAX_TIME",
    "MAX_BURST",
    "MAX_MSS",
    "MAX_STREAMS",
    "COOKIE_SIZE",
    "IPV6_FL_A_GET",
    "IPV6_FL_A_PUT",
    "IPV6_FL_A_RENEW",
    "IPV6_FL_F_CREATE",
    "IPV6_FL_F_EXCL",
    "IPV6_FL_S_NONE",
    "IPV6_FL_S_EXCL",
    "IPV6_FL_S_PROCESS",
    "IPV6_FL_S_USER",
    "IPV6_FL_S_ANY",
    "IPV6_FLOWINFO_FLOWLABEL",
    "IPV6_FLOWINFO_PRIORITY",
    "IPV6_FLOWLABEL_MGR",
    "IPV6_FLOWINFO_SEND",
]


class IperfMode(IntEnum):
    """Direction in which a test sends data."""

    SENDER = 1
    RECEIVER = 0
    BIDIRECTIONAL = -1


PORT = 5201
UDP_RATE = 1024 * 1024
OMIT = 0
DURATION = 10

US_TO_NS = 1000
SEC_TO_US = 1_000_000
SEC_TO_NS = 1_000_000_000
MAX_RESULT_STRING = 4096

UDP_BUFFER_EXTRA = 1024

MB = 1024 * 1024
MAX_TCP_BUFFER = 512 * MB
MAX_BLOCKSIZE = MB
MIN_UDP_BLOCKSIZE = 4 + 4 + 8
MAX_UDP_BLOCKSIZE = 65535 - 8 - 20
MIN_INTERVAL = 0.1
MAX_INTERVAL = 60.0
MAX_TIME = 86400
MAX_BURST = 1000
MAX_MSS = 9 * 1024
MAX_STREAMS = 128

COOKIE_SIZE = 37

IPV6_FL_A_GET = 0
IPV6_FL_A_PUT = 1
IPV6_FL_A_RENEW = 2

IPV6_FL_F_CREATE = 1
IPV6_FL_F_EXCL = 2

IPV6_FL_S_NONE = 0
IPV6_FL_S_EXCL = 1
IPV6_FL_S_PROCESS = 2
IPV6_FL_S_USER = 3
IPV6_FL_S_ANY = 255

IPV6_FLOWINFO_FLOWLABEL = 0x000FFFFF
IPV6_FLOWINFO_PRIORITY = 0x0FF00000

IPV6_FLOWLABEL_MGR = 32
IPV6_FLOWINFO_SEND = 33