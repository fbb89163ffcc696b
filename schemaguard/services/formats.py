"""
Named formats for the ``format`` keyword.

The registry is compiled once at import and exposed read-only, so it can be
shared by concurrent validate calls without locking.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

_HEX = "[0-9a-fA-F]{1,4}"
_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"

_IPV6 = "|".join(
    [
        f"(?:{_HEX}:){{7}}{_HEX}",
        f"(?:{_HEX}:){{1,7}}:",
        f"(?:{_HEX}:){{1,6}}:{_HEX}",
        f"(?:{_HEX}:){{1,5}}(?::{_HEX}){{1,2}}",
        f"(?:{_HEX}:){{1,4}}(?::{_HEX}){{1,3}}",
        f"(?:{_HEX}:){{1,3}}(?::{_HEX}){{1,4}}",
        f"(?:{_HEX}:){{1,2}}(?::{_HEX}){{1,5}}",
        f"{_HEX}:(?::{_HEX}){{1,6}}",
        f":(?:(?::{_HEX}){{1,7}}|:)",
    ]
)

_PATTERNS = {
    "date-time": r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})?\Z",
    "date": r"^\d{4}-\d{2}-\d{2}\Z",
    "time": r"^\d{2}:\d{2}:\d{2}(\.\d+)?\Z",
    "email": r"^[^@\s]+@[^@\s]+\.[^@\s]+\Z",
    "hostname": rf"^(?=.{{1,253}}\Z){_LABEL}(?:\.{_LABEL})*\Z",
    "ipv4": rf"^(?:{_OCTET}\.){{3}}{_OCTET}\Z",
    "ipv6": rf"^(?:{_IPV6})\Z",
    "uri": r"^[A-Za-z][A-Za-z0-9+.-]*:\S+\Z",
}

FORMATS: Mapping[str, re.Pattern[str]] = MappingProxyType(
    {name: re.compile(pattern) for name, pattern in _PATTERNS.items()}
)


def known_formats() -> list[str]:
    return sorted(FORMATS)
