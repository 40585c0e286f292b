from __future__ import annotations

BYTE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_bytes(size: int) -> str:
    """Scale *size* by powers of 1024 and print it with two decimals.

    >>> format_bytes(1536)
    '1.50 KiB'
    """
    if size == 0:
        return "0 B"
    value = float(size)
    unit = 0
    while abs(value) >= 1024 and unit < len(BYTE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {BYTE_UNITS[unit]}"


def format_temperature(celsius: float | None) -> str:
    if celsius is None:
        return "N/A"
    return f"{celsius:.1f}°C"


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."
