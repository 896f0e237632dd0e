"""Mini README: Positional label storage for classifier outputs.

Structure:
    * load_labels - read a newline-delimited label resource into a list.
    * lookup_label - bounds-checked index lookup with a fallback label.
    * LabelStore - immutable wrapper created once at startup.

Line ``N`` (0-based) of the resource names class index ``N``. Reading never
raises: a missing or unreadable resource yields an empty list and every
lookup then falls back to ``"Unknown (<id>)"``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

UNKNOWN_LABEL_TEMPLATE = "Unknown ({identifier})"


def load_labels(resource: Union[str, Path]) -> List[str]:
    """Return the labels stored in ``resource`` in file order."""

    path = Path(resource)
    try:
        with path.open("r", encoding="utf-8") as handle:
            labels = [line.rstrip("\r\n") for line in handle]
    except (OSError, UnicodeDecodeError):
        LOGGER.exception("Error loading labels from %s", path)
        return []
    LOGGER.info("Loaded %s labels from %s", len(labels), path)
    return labels


def lookup_label(
    labels: Sequence[str], index: int, raw_label: Optional[str] = None
) -> str:
    """Resolve ``index`` against ``labels`` without ever raising.

    Out-of-range indices (negative ones included) produce a fallback that
    embeds the classifier's own label when it supplied one, else the index.
    """

    if 0 <= index < len(labels):
        return labels[index]
    identifier = raw_label if raw_label else index
    LOGGER.debug("Index %s outside label list of size %s", index, len(labels))
    return UNKNOWN_LABEL_TEMPLATE.format(identifier=identifier)


class LabelStore:
    """Ordered, read-only label list addressed by class index."""

    def __init__(self, labels: Sequence[str] = ()) -> None:
        self._labels: Tuple[str, ...] = tuple(labels)

    @classmethod
    def from_file(cls, resource: Union[str, Path]) -> "LabelStore":
        return cls(load_labels(resource))

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    def lookup(self, index: int, raw_label: Optional[str] = None) -> str:
        return lookup_label(self._labels, index, raw_label)

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"LabelStore(size={len(self._labels)})"
