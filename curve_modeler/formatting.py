"""
Display helpers. Take already-computed numbers and return strings;
no model logic lives here.
"""
import math
from enum import Enum

from .types import RarityTier, CyclingProfileType, RunningProfileType

PLACEHOLDER = "--:--"

CARD_RARITY_LEVELS = {
    RarityTier.ALIEN: "GOAT",
    RarityTier.HERO: "GOAT",
    RarityTier.PRO: "LEGGENDA",
    RarityTier.ELITE: "ELITE",
    RarityTier.STANDARD: "BASE",
}

PROFILE_DISPLAY_NAMES = {
    CyclingProfileType.SPRINTER: "Sprinter",
    CyclingProfileType.PUNCHEUR: "Puncheur",
    CyclingProfileType.CLIMBER: "Climber",
    CyclingProfileType.TIME_TRIALIST: "Time Trialist",
    CyclingProfileType.ALL_ROUNDER: "All-Rounder",
    RunningProfileType.FAST_MIDDLE_DISTANCE: "Fast Middle-Distance Runner",
    RunningProfileType.MIDDLE_DISTANCE: "Middle-Distance Runner",
    RunningProfileType.LONG_DISTANCE: "Long-Distance Runner",
    RunningProfileType.HALF_MARATHON_SPECIALIST: "Half Marathon Specialist",
    RunningProfileType.MARATHONER: "Marathoner",
    RunningProfileType.COMPLETE_ATHLETE: "Complete Athlete",
}


def _is_displayable(value) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def format_duration(seconds: float) -> str:
    """Compact duration label for chart axes (e.g. 45s, 5min, 1h30min)."""
    if not _is_displayable(seconds):
        return PLACEHOLDER
    seconds = int(round(seconds))
    if seconds < 60:
        return f"{seconds}s"
    elif seconds < 3600:
        mins = seconds // 60
        secs = seconds % 60
        return f"{mins}min{secs}s" if secs else f"{mins}min"
    else:
        hours = seconds // 3600
        mins = (seconds % 3600) // 60
        return f"{hours}h{mins}min" if mins else f"{hours}h"


def format_pace(seconds_per_km: float) -> str:
    """Pace as m:ss (per km)."""
    if not _is_displayable(seconds_per_km):
        return PLACEHOLDER
    total = int(round(seconds_per_km))
    return f"{total // 60}:{total % 60:02d}"


def format_race_time(total_seconds: float) -> str:
    """Race time as h:mm:ss, or m:ss under one hour."""
    if not _is_displayable(total_seconds):
        return PLACEHOLDER
    total = int(round(total_seconds))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_distance(meters: float, unit: str = "km") -> str:
    if not _is_displayable(meters):
        return PLACEHOLDER
    if unit == "km":
        return f"{meters / 1000:.2f} km"
    return f"{int(round(meters))} m"


def format_power(watts: float, decimals: int = 0) -> str:
    if not _is_displayable(watts):
        return PLACEHOLDER
    return f"{watts:.{decimals}f} W"


def card_rarity_level(tier: RarityTier) -> str:
    """Card styling level for a rarity tier."""
    return CARD_RARITY_LEVELS[RarityTier(tier)]


def profile_display_name(profile_type: Enum) -> str:
    return PROFILE_DISPLAY_NAMES.get(profile_type, str(getattr(profile_type, "value", profile_type)))
