"""Payload access and weather condition normalization - pure functions for testability."""
from typing import Any, List, Optional, Tuple
from weather_data import ConditionCategory

# Icon identifiers understood by the render target
ICON_STORM = "storm"
ICON_SNOW = "snow"
ICON_RAIN = "rain"
ICON_FOG = "fog"
ICON_OVERCAST = "overcast"
ICON_CLOUD_DAY = "cloud-day"
ICON_CLOUD_NIGHT = "cloud-night"
ICON_CLEAR_DAY = "clear-day"
ICON_CLEAR_NIGHT = "clear-night"

# Order matters: "SNOW_SHOWERS" must hit snow before showers, "MOSTLY_CLOUDY" is
# matched by "CLOUDY", etc. First match wins.
TYPE_RULES: List[Tuple[Tuple[str, ...], ConditionCategory]] = [
    (("THUNDER", "STORM"), ConditionCategory.STORM),
    (("SNOW",), ConditionCategory.SNOW),
    (("RAIN", "SHOWERS"), ConditionCategory.RAIN),
    (("FOG", "HAZE", "MIST"), ConditionCategory.FOG),
    (("OVERCAST",), ConditionCategory.OVERCAST),
    (("MOSTLY_CLOUDY", "CLOUDY", "PARTLY_CLOUDY"), ConditionCategory.CLOUDY),
    (("CLEAR", "SUNNY"), ConditionCategory.CLEAR),
]

TEXT_RULES: List[Tuple[Tuple[str, ...], ConditionCategory]] = [
    (("storm", "thunder"), ConditionCategory.STORM),
    (("snow", "sleet"), ConditionCategory.SNOW),
    (("rain", "drizzle"), ConditionCategory.RAIN),
    (("fog", "mist", "haze"), ConditionCategory.FOG),
    (("overcast",), ConditionCategory.OVERCAST),
    (("cloud",), ConditionCategory.CLOUDY),
    (("clear", "sunny"), ConditionCategory.CLEAR),
]


def safe_get(tree: Any, path: str, fallback: Any = None) -> Any:
    """
    Walk a dotted path through nested dicts (and lists, by digit index).

    Any missing or null step, or a step into a non-container, yields the
    fallback instead of raising. A null leaf also yields the fallback.

    Args:
        tree: Parsed JSON value
        path: Dotted path, e.g. "wind.speed.value"
        fallback: Value returned when the path cannot be resolved

    Returns:
        The value at the path, or the fallback
    """
    node = tree
    for key in path.split("."):
        if isinstance(node, dict):
            node = node.get(key)
        elif isinstance(node, list) and key.isdigit() and int(key) < len(node):
            node = node[int(key)]
        else:
            return fallback
        if node is None:
            return fallback
    return node


def normalize_condition_text(condition: Any) -> Optional[str]:
    """
    Resolve a weatherCondition value of any supported shape to display text.

    Accepted shapes, in priority order: a plain string, {"description": str},
    {"description": {"text": str}}, {"type": str}. Anything else is None.
    """
    if not condition:
        return None
    if isinstance(condition, str):
        return condition
    if not isinstance(condition, dict):
        return None

    description = condition.get("description")
    if isinstance(description, str):
        return description
    if isinstance(description, dict) and isinstance(description.get("text"), str):
        return description["text"]

    if isinstance(condition.get("type"), str):
        return condition["type"]
    return None


def condition_type(condition: Any) -> str:
    """Uppercased "type" tag of a condition, or "" if it has none."""
    if not isinstance(condition, dict):
        return ""
    tag = condition.get("type")
    if not tag:
        return ""
    return str(tag).upper()


def _match(rules, text: str) -> Optional[ConditionCategory]:
    for tokens, category in rules:
        if any(token in text for token in tokens):
            return category
    return None


def categorize(condition: Any, typed: bool = False) -> Optional[ConditionCategory]:
    """
    Map a condition to its coarse category.

    With typed=True the "type" tag is matched first; the description text is
    only consulted when the tag is absent. Returns None if nothing matches.
    """
    if typed:
        tag = condition_type(condition)
        if tag:
            return _match(TYPE_RULES, tag)
    text = (normalize_condition_text(condition) or "").lower()
    return _match(TEXT_RULES, text)


def pick_symbol(condition: Any, is_daytime: bool, typed: bool = False) -> str:
    """
    Choose an icon identifier for a condition.

    Args:
        condition: Raw weatherCondition value
        is_daytime: Selects the day or night variant of cloud/clear icons
        typed: Match the "type" enumeration before the description text

    Returns:
        Icon identifier; unmatched conditions fall back to clear sky
    """
    day = bool(is_daytime)
    category = categorize(condition, typed=typed)

    if category is ConditionCategory.STORM:
        return ICON_STORM
    if category is ConditionCategory.SNOW:
        return ICON_SNOW
    if category is ConditionCategory.RAIN:
        return ICON_RAIN
    if category is ConditionCategory.FOG:
        return ICON_FOG
    if category is ConditionCategory.OVERCAST:
        return ICON_OVERCAST
    if category is ConditionCategory.CLOUDY:
        return ICON_CLOUD_DAY if day else ICON_CLOUD_NIGHT
    return ICON_CLEAR_DAY if day else ICON_CLEAR_NIGHT
