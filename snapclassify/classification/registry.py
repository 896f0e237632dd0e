"""Mini README: Registry of classifier backends.

Structure:
    * ClassifierRegistry - maps backend names to ``ImageClassifier`` classes.
    * REGISTRY - shared instance with the built-in LiteRT backend.

Additional backends register themselves at import time, keeping the
service layer unaware of concrete model runtimes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Type, Union

from ..logging_utils import get_logger
from .classifier import ClassifierOptions, ImageClassifier, LiteRTImageClassifier

LOGGER = get_logger(__name__)


class ClassifierRegistry:
    """Simple registry for mapping backend identifiers to classes."""

    def __init__(self) -> None:
        self._backends: Dict[str, Type[ImageClassifier]] = {}

    def register(self, backend: Type[ImageClassifier]) -> None:
        """Register a classifier class under its ``backend_name``."""

        identifier = backend.backend_name.lower()
        LOGGER.debug("Registering classifier backend '%s'", identifier)
        self._backends[identifier] = backend

    def available_backends(self) -> Iterable[str]:
        return sorted(self._backends.keys())

    def create(
        self,
        identifier: str,
        *,
        model_path: Union[str, Path],
        options: Optional[ClassifierOptions] = None,
        model_labels: Optional[Sequence[str]] = None,
    ) -> ImageClassifier:
        """Instantiate the backend matching ``identifier``."""

        backend_cls = self._backends.get(identifier.lower())
        if not backend_cls:
            raise KeyError(f"Unknown classifier backend '{identifier}'")
        LOGGER.info("Creating classifier backend '%s' for %s", identifier, model_path)
        return backend_cls(model_path, options, model_labels=model_labels)


REGISTRY = ClassifierRegistry()
REGISTRY.register(LiteRTImageClassifier)
