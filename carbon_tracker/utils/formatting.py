"""
Display helpers for emission values and record timestamps.
"""
from datetime import datetime


def format_emission(value: float, precision: int = 2) -> str:
    """Format kg CO2, e.g. ``12.34 kg CO₂``."""
    return f"{value:.{precision}f} kg CO₂"


def format_day(value: datetime) -> str:
    """Medium date in local time, e.g. ``Feb 24, 2025``."""
    local = value.astimezone()
    return f"{local:%b} {local.day}, {local.year}"


def format_time(value: datetime) -> str:
    """Short time in local time, e.g. ``3:45 PM``."""
    local = value.astimezone()
    hour = local.hour % 12 or 12
    return f"{hour}:{local:%M %p}"
