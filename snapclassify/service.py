"""Mini README: Classification workflow shared by the web app and the CLI.

Structure:
    * ClassificationService - loads labels, builds the classifier and turns
      images into display text.
    * NOT_READY_TEXT - shown when the classifier could not be created.

The service never raises while describing an image: a missing classifier,
an undecodable upload or an inference failure all come back as text the
caller can display directly.
"""

from __future__ import annotations

from typing import Optional

from PIL import Image

from .classification import REGISTRY, ClassifierOptions, ImageClassifier, decode_image
from .configuration import SnapClassifySettings, get_settings
from .formatting import ResultFormatter
from .labels import LabelStore, load_labels
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

NOT_READY_TEXT = "Classifier not initialised"


class ClassificationService:
    """Own the label store and classifier for the lifetime of the process."""

    def __init__(
        self,
        settings: Optional[SnapClassifySettings] = None,
        *,
        classifier: Optional[ImageClassifier] = None,
        label_store: Optional[LabelStore] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.classifier = classifier
        self.label_store = label_store or LabelStore()
        self.formatter = ResultFormatter(self.label_store)
        self._label_store_supplied = label_store is not None

    @property
    def ready(self) -> bool:
        return self.classifier is not None

    def setup(self) -> None:
        """Load labels and create the configured classifier backend.

        Classifier-side labels come from ``model_labels_path`` when set;
        otherwise the backend may read the ones bundled with the model.
        """

        if not self._label_store_supplied:
            self.label_store = LabelStore.from_file(self.settings.labels_path)
            self.formatter = ResultFormatter(self.label_store)
        if self.classifier is not None:
            return
        options = ClassifierOptions(
            max_results=self.settings.max_results,
            score_threshold=self.settings.score_threshold,
        )
        model_labels = None
        if self.settings.model_labels_path is not None:
            model_labels = load_labels(self.settings.model_labels_path)
        try:
            self.classifier = REGISTRY.create(
                self.settings.classifier_backend,
                model_path=self.settings.model_path,
                options=options,
                model_labels=model_labels,
            )
        except Exception:
            LOGGER.exception(
                "Error initialising classifier backend '%s'",
                self.settings.classifier_backend,
            )
            self.classifier = None
            return
        LOGGER.info("Classifier backend '%s' ready", self.settings.classifier_backend)

    def describe(self, image: Image.Image) -> str:
        """Classify ``image`` and return the display text."""

        if self.classifier is None:
            return NOT_READY_TEXT
        try:
            results = self.classifier.classify(image)
        except Exception as error:
            LOGGER.exception("Classification failed")
            return f"Error during classification: {error}"
        return self.formatter.format(results)

    def describe_bytes(self, data: bytes) -> str:
        """Decode an encoded image and describe it."""

        try:
            image = decode_image(data)
        except ValueError as error:
            LOGGER.warning("Rejected image upload: %s", error)
            return f"Error loading image: {error}"
        return self.describe(image)
