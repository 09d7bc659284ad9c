from __future__ import annotations


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x

def wrap_deg(x: float) -> float:
    x = x % 360.0
    return x if x >= 0 else x + 360.0

def fnv1a_32(text: str) -> int:
    """
    32-bit FNV-1a hash of the UTF-8 bytes of text.
    Stable across runs and interpreters, unlike the builtin hash().
    """
    h = 0x811C9DC5
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * 0x01000193) & 0xFFFFFFFF
    return h

def ra_hours(ra_deg: float) -> int:
    """Whole hours of right ascension for a RA in degrees."""
    return int(wrap_deg(ra_deg) * 24.0 / 360.0)
