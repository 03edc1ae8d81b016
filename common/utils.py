"""Common utility functions."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

import yaml


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def utc_timestamp(when: datetime | None = None) -> str:
    """Compact UTC timestamp used in report file names (YYYYmmddHHMMSS)."""
    when = when or utc_now()
    return when.strftime("%Y%m%d%H%M%S")


_SIZE_EXPONENTS = {'': 0, 'K': 1, 'M': 2, 'G': 3, 'T': 4, 'P': 5, 'E': 6}
_IEC_UNITS = ('B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB')


def parse_size(size_str: str) -> int:
    """Parse a size string (e.g., '64MiB', '512M', '4k', '1GB') to bytes.

    Decimal suffixes (KB, MB, ...) and IEC suffixes (KiB, MiB, ...) both
    resolve to powers of 1024, the way the admin API interprets them.
    """
    match = re.fullmatch(r'(\d+(?:\.\d+)?)\s*(?:([KMGTPE])I?)?B?', size_str.strip().upper())
    if not match:
        raise ValueError(f"Invalid size format: {size_str}")

    number, prefix = match.groups()
    return int(float(number) * 1024 ** _SIZE_EXPONENTS[prefix or ''])


def format_size(bytes_val: int, precision: int = 1) -> str:
    """Format bytes to a human-readable IEC string (e.g. '64 MiB')."""
    size = float(max(bytes_val, 0))
    for unit in _IEC_UNITS[:-1]:
        if size < 1024:
            break
        size /= 1024
    else:
        unit = _IEC_UNITS[-1]

    if size.is_integer():
        return f"{int(size)} {unit}"
    return f"{size:.{precision}f} {unit}"


def format_count(value: int) -> str:
    """Format an integer with thousands separators."""
    return f"{value:,}"


_DURATION_UNITS = {
    'ns': 1e-9,
    'us': 1e-6,
    'µs': 1e-6,
    'ms': 1e-3,
    's': 1,
    'm': 60,
    'h': 3600,
}


def parse_duration(duration_str: str) -> float:
    """Parse a duration string (e.g. '10s', '1m30s', '500ms') to seconds."""
    duration_str = duration_str.strip()
    if not duration_str:
        raise ValueError("Empty duration")

    parts = re.findall(r'(\d+(?:\.\d+)?)(ns|us|µs|ms|s|m|h)', duration_str)
    if not parts or "".join(n + u for n, u in parts) != duration_str:
        raise ValueError(f"Invalid duration format: {duration_str}")

    return sum(float(n) * _DURATION_UNITS[u] for n, u in parts)


def format_duration(seconds: float) -> str:
    """Format seconds as a compact duration string ('500ms', '10s', '1m30s', '1.5s')."""
    if 0 < seconds < 1:
        return f"{seconds * 1000:g}ms"
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    if hours:
        return f"{hours}h{minutes}m{secs:g}s"
    if minutes:
        return f"{minutes}m{secs:g}s" if secs else f"{minutes}m"
    return f"{secs:g}s"


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file; an empty file yields an empty dict."""
    return yaml.safe_load(Path(path).read_text()) or {}


def save_yaml(path: str | Path, data: dict) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))


def sanitize_filename(name: str) -> str:
    """Turn an alias into something safe to use in a report file name."""
    return re.sub(r'[^\w\-.]', '', name.replace(' ', '_'))[:255]
