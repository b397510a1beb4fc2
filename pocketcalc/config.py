"""Settings for pocketcalc, read from the environment.

Every knob has a default; POCKETCALC_* variables override them.
Self-contained, no external dependencies.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_DISPLAY_LIMIT = 11
DEFAULT_TRUNCATE_WIDTH = 10
DEFAULT_PROMPT = "Enter an expression (or 'q' to quit)"


def _int_from_env(env: Mapping[str, str], key: str, default: int) -> int:
    """Read a positive int from env, falling back to default on junk."""
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    """Display-width policy and shell prompt.

    A unary result containing a '.' and longer than display_limit characters
    is cut down to its first truncate_width characters.
    """

    display_limit: int = DEFAULT_DISPLAY_LIMIT
    truncate_width: int = DEFAULT_TRUNCATE_WIDTH
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from POCKETCALC_* variables.

        Args:
            env: Mapping to read from. Defaults to os.environ.
        """
        env = os.environ if env is None else env
        return cls(
            display_limit=_int_from_env(env, "POCKETCALC_DISPLAY_LIMIT", DEFAULT_DISPLAY_LIMIT),
            truncate_width=_int_from_env(env, "POCKETCALC_TRUNCATE_WIDTH", DEFAULT_TRUNCATE_WIDTH),
            prompt=env.get("POCKETCALC_PROMPT") or DEFAULT_PROMPT,
        )
