"""Line-based prompt helpers shared by the interactive operations."""
from __future__ import annotations

import math
from typing import Callable, Optional

Prompt = Callable[[str], str]
Emit = Callable[[str], None]


def read_text(prompt: Prompt, message: str) -> str:
    return prompt(message).strip()


def read_int(prompt: Prompt, message: str) -> Optional[int]:
    """Read an integer; anything unparsable comes back as ``None``."""
    raw = prompt(message).strip()
    try:
        return int(raw)
    except ValueError:
        return None


def read_price(prompt: Prompt, message: str) -> Optional[float]:
    raw = prompt(message).strip().lstrip("$")
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def read_yes(prompt: Prompt, message: str) -> bool:
    return prompt(message).strip().lower().startswith("y")
