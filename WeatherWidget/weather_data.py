"""Weather domain model - display-ready structures independent of the API schema."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple


class ConditionCategory(Enum):
    """Coarse condition bucket used for icon selection."""
    CLEAR = "clear"
    CLOUDY = "cloudy"
    OVERCAST = "overcast"
    RAIN = "rain"
    SNOW = "snow"
    STORM = "storm"
    FOG = "fog"


@dataclass
class Location:
    """Coordinates plus an optional place name."""
    latitude: float
    longitude: float
    name: Optional[str] = None


@dataclass
class ColorScheme:
    """Two-color background gradient."""
    name: str  # "cold", "mild", "hot" or "night"
    colors: Tuple[str, str]


@dataclass
class DaySummary:
    """One entry of the forecast mini-row."""
    label: str  # e.g. "Mon", "Today", "+2"
    icon: str
    temperatures: str  # compact "max / min"


@dataclass
class DisplayModel:
    """Presenter output - everything the render target needs, nothing more."""
    location_label: str
    updated_label: str
    temperature: str
    condition: str
    feels_like: str
    humidity: str
    wind: str
    icon: str
    color_scheme: ColorScheme
    refresh_after: datetime
    days: List[DaySummary] = field(default_factory=list)


@dataclass
class StatusDisplay:
    """Minimal display used for terminal errors and empty payloads."""
    title: str
    message: str
    refresh_after: datetime
