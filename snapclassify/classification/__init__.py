"""Mini README: Image classification subsystem.

Exports the result containers, the classifier base class with its LiteRT
backend, preprocessing helpers and the backend registry.
"""

from .classifier import (
    ClassifierOptions,
    ImageClassifier,
    LiteRTImageClassifier,
    read_embedded_labels,
)
from .preprocessing import decode_image, to_input_tensor
from .registry import REGISTRY, ClassifierRegistry
from .results import Category, Classifications

__all__ = [
    "Category",
    "ClassifierOptions",
    "ClassifierRegistry",
    "Classifications",
    "ImageClassifier",
    "LiteRTImageClassifier",
    "REGISTRY",
    "decode_image",
    "read_embedded_labels",
    "to_input_tensor",
]
