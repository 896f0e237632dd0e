"""Mini README: Turn classifier output into display text.

Structure:
    * format_classifications - render groups against a label list.
    * ResultFormatter - the same rendering bound to a ``LabelStore``.
    * NO_RESULTS_TEXT - returned when the classifier reported no groups.

Each category becomes ``"<label>: <score * 100 to 2 decimals>%"`` followed by
a newline. Groups and categories keep the order the classifier returned;
nothing is sorted, merged or filtered here.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..classification.results import Classifications
from ..labels import LabelStore, lookup_label

NO_RESULTS_TEXT = "No classification results"


def format_line(label: str, score: float) -> str:
    """Render one category, rounding the percentage to two decimals."""

    confidence = score * 100
    return f"{label}: {confidence:.2f}%\n"


def format_classifications(
    groups: Sequence[Classifications], labels: Sequence[str]
) -> str:
    """Return the display text for ``groups`` or ``NO_RESULTS_TEXT``."""

    if not groups:
        return NO_RESULTS_TEXT
    lines: List[str] = []
    for group in groups:
        for category in group.categories:
            label = lookup_label(labels, category.index, category.label)
            lines.append(format_line(label, category.score))
    return "".join(lines)


class ResultFormatter:
    """Formatter bound to the label store loaded at startup."""

    def __init__(self, label_store: LabelStore) -> None:
        self.label_store = label_store

    def format(self, groups: Iterable[Classifications]) -> str:
        return format_classifications(list(groups), self.label_store.labels)
