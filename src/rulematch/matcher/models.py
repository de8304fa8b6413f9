"""Rule data model — a (type, pattern) pair awaiting evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rule:
    """A single stored rule.

    ``pattern`` is opaque to the engine; its meaning belongs to whichever
    handler is registered under ``type`` when the rule is evaluated.
    """

    type: str
    pattern: Any
