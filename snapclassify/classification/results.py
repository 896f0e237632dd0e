"""Mini README: Result containers produced by image classifiers.

Structure:
    * Category - one scored class index from an inference pass.
    * Classifications - the ordered categories of one output head.

The formatter only consumes these objects; classifiers build them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Category:
    """A class index with its confidence score in ``[0, 1]``."""

    index: int
    score: float
    label: str = ""


@dataclass(slots=True)
class Classifications:
    """Categories reported for a single classification head."""

    categories: List[Category] = field(default_factory=list)
    head_index: int = 0
