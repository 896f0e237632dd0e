"""Mini README: Image classifier abstractions and the LiteRT backend.

Structure:
    * ClassifierOptions - result limits applied to every inference pass.
    * ImageClassifier - base class turning raw score rows into categories.
    * LiteRTImageClassifier - runs a ``.tflite`` model with the LiteRT interpreter.
    * read_embedded_labels - label file packed into a model with TFLite metadata.

Backends only implement ``predict_scores``; ranking, thresholding and
truncation live in the base class so every backend reports results the
same way.
"""

from __future__ import annotations

import zipfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np
from PIL import Image

try:  # pragma: no cover - optional dependency guard
    from ai_edge_litert.interpreter import Interpreter  # type: ignore
except Exception:  # pragma: no cover - handled when the backend is created
    Interpreter = None  # type: ignore

from ..logging_utils import get_logger
from .preprocessing import to_input_tensor
from .results import Category, Classifications

LOGGER = get_logger(__name__)


def read_embedded_labels(model_path: Union[str, Path]) -> List[str]:
    """Return the label file bundled in a ``.tflite`` model, if any.

    Models written by the TFLite metadata populator carry their associated
    files as a zip archive appended to the flatbuffer.
    """

    path = Path(model_path)
    try:
        if not zipfile.is_zipfile(path):
            return []
        with zipfile.ZipFile(path) as archive:
            names = [name for name in archive.namelist() if name.endswith(".txt")]
            if not names:
                return []
            text = archive.read(names[0]).decode("utf-8")
    except (OSError, zipfile.BadZipFile, UnicodeDecodeError):
        LOGGER.exception("Error reading embedded labels from %s", path)
        return []
    labels = text.splitlines()
    LOGGER.info("Read %s embedded labels (%s) from %s", len(labels), names[0], path)
    return labels


@dataclass(slots=True)
class ClassifierOptions:
    """Limits on the categories reported for each head."""

    max_results: int = 3
    score_threshold: float = 0.3

    def __post_init__(self) -> None:
        if not 0.0 <= self.score_threshold <= 1.0:
            raise ValueError(
                f"score_threshold must be within [0, 1], got {self.score_threshold}"
            )


class ImageClassifier(ABC):
    """Base interface for image classification backends."""

    backend_name: str = "generic"

    def __init__(
        self,
        options: Optional[ClassifierOptions] = None,
        *,
        model_labels: Optional[Sequence[str]] = None,
    ) -> None:
        self.options = options or ClassifierOptions()
        self.model_labels = list(model_labels or [])
        LOGGER.debug(
            "Initialising %s classifier (max_results=%s, score_threshold=%s)",
            self.backend_name,
            self.options.max_results,
            self.options.score_threshold,
        )

    @abstractmethod
    def predict_scores(self, image: Image.Image) -> np.ndarray:
        """Return per-class scores, one row per output head."""

    def classify(self, image: Image.Image) -> List[Classifications]:
        """Run inference and return the reported categories of every head."""

        scores = np.atleast_2d(np.asarray(self.predict_scores(image), dtype=np.float32))
        if scores.ndim > 2:
            scores = scores.reshape(scores.shape[0], -1)
        results = [
            Classifications(categories=self._select(row), head_index=head_index)
            for head_index, row in enumerate(scores)
        ]
        LOGGER.debug(
            "%s classifier produced %s heads with %s categories",
            self.backend_name,
            len(results),
            sum(len(result.categories) for result in results),
        )
        return results

    def _select(self, row: np.ndarray) -> List[Category]:
        # Stable sort keeps the lower index first on equal scores.
        order = np.argsort(-row, kind="stable")
        categories: List[Category] = []
        for index in order:
            score = float(row[index])
            if score < self.options.score_threshold:
                break
            categories.append(
                Category(index=int(index), score=score, label=self._model_label(int(index)))
            )
            if 0 < self.options.max_results <= len(categories):
                break
        return categories

    def _model_label(self, index: int) -> str:
        if 0 <= index < len(self.model_labels):
            return self.model_labels[index]
        return ""


class LiteRTImageClassifier(ImageClassifier):
    """Classifier backed by a TensorFlow Lite model file."""

    backend_name = "litert"

    def __init__(
        self,
        model_path: Union[str, Path],
        options: Optional[ClassifierOptions] = None,
        *,
        model_labels: Optional[Sequence[str]] = None,
    ) -> None:
        super().__init__(options, model_labels=model_labels)
        self.model_path = Path(model_path)
        if Interpreter is None:
            raise RuntimeError(
                "LiteRT is not installed; install the 'litert' extra to run .tflite models"
            )
        if not self.model_path.is_file():
            raise FileNotFoundError(f"Model file not found: {self.model_path}")
        if not self.model_labels:
            self.model_labels = read_embedded_labels(self.model_path)
        self._interpreter = Interpreter(model_path=str(self.model_path))
        self._interpreter.allocate_tensors()
        self._input = self._interpreter.get_input_details()[0]
        self._output = self._interpreter.get_output_details()[0]
        LOGGER.info(
            "Loaded model %s with input shape %s", self.model_path, self._input["shape"]
        )

    def predict_scores(self, image: Image.Image) -> np.ndarray:
        _, height, width, _ = self._input["shape"]
        tensor = to_input_tensor(image, int(height), int(width), self._input["dtype"])
        self._interpreter.set_tensor(self._input["index"], tensor)
        self._interpreter.invoke()
        raw = self._interpreter.get_tensor(self._output["index"])
        return self._dequantize(raw)

    def _dequantize(self, raw: np.ndarray) -> np.ndarray:
        scale, zero_point = self._output.get("quantization", (0.0, 0))
        if np.issubdtype(raw.dtype, np.integer) and scale:
            return (raw.astype(np.float32) - zero_point) * scale
        return raw.astype(np.float32)
