from __future__ import annotations

UNITS = ["B", "KB", "MB", "GB"]


def format_bytes(size: int) -> str:
    if size <= 0:
        return "0 B"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(value)} {UNITS[unit]}"
    return f"{value:.1f} {UNITS[unit]}"


def content_size(content: str) -> int:
    return len(content.encode("utf-8"))


def preview(content: str, max_width: int = 40) -> str:
    flat = content.replace("\n", "\\n")
    if len(flat) <= max_width:
        return flat
    return f"{flat[: max_width - 3]}..."
