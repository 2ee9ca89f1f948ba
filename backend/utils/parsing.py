import json
import math
import re
from typing import Any, Optional, Dict


def extract_json_block(text: str) -> Optional[Dict[str, Any]]:
    """Extract the first balanced JSON object embedded in text."""
    if not text:
        return None
    
    start = text.find("{")
    if start == -1:
        return None
    
    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                candidate = text[start : i + 1]
                try:
                    return json.loads(candidate)
                except ValueError:
                    try:
                        cleaned = re.sub(r"[\x00-\x1f]", "", candidate)
                        return json.loads(cleaned)
                    except ValueError:
                        return None
    return None


def parse_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Parse a model reply that should be a JSON object, tolerating surrounding prose or code fences."""
    if not isinstance(text, str) or not text.strip():
        return None
    try:
        parsed = json.loads(text)
    except ValueError:
        # Oversized integer literals raise a plain ValueError, not JSONDecodeError.
        parsed = extract_json_block(text)
    return parsed if isinstance(parsed, dict) else None


def to_number(val: Any) -> Optional[float]:
    """Return val as a float, or None if it is not a number. NaN counts as not a number."""
    if val is None or isinstance(val, bool):
        return None
    if not isinstance(val, (int, float, str)):
        return None
    try:
        number = float(val.strip() if isinstance(val, str) else val)
    except (OverflowError, ValueError):
        return None
    return None if math.isnan(number) else number


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def coerce_number(val: Any, lower: float, upper: float, default: float) -> float:
    """Numeric value of val clamped to [lower, upper]; default (also clamped) when val is missing or non-numeric."""
    number = to_number(val)
    if number is None:
        number = default
    return clamp(number, lower, upper)
