"""Mini README: Label resolution for classifier category indices.

Exports the label loader, the bounds-checked lookup helper and the
``LabelStore`` wrapper shared by the formatter and the service layer.
"""

from .store import LabelStore, UNKNOWN_LABEL_TEMPLATE, load_labels, lookup_label

__all__ = ["LabelStore", "UNKNOWN_LABEL_TEMPLATE", "load_labels", "lookup_label"]
