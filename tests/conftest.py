"""Mini README: Shared fixtures for the SnapClassify test-suite.

Provides a fake classifier returning fixed score rows, a fake LiteRT
interpreter, a tiny PNG payload and settings pointing at temporary files.
"""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np
import pytest
from PIL import Image

from snapclassify.classification import REGISTRY, ClassifierOptions, ImageClassifier
from snapclassify.configuration import SnapClassifySettings


class FixedScoreClassifier(ImageClassifier):
    """Classifier returning the same score rows for every image."""

    backend_name = "fixed"

    def __init__(
        self,
        model_path: Optional[Path] = None,
        options: Optional[ClassifierOptions] = None,
        *,
        model_labels: Optional[Sequence[str]] = None,
        scores: Optional[Sequence[Sequence[float]]] = None,
    ) -> None:
        super().__init__(options, model_labels=model_labels)
        self.model_path = model_path
        self.scores = np.asarray(scores if scores is not None else [[0.1, 0.7, 0.2]])
        self.calls = 0

    def predict_scores(self, image: Image.Image) -> np.ndarray:
        self.calls += 1
        return self.scores


@pytest.fixture
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (8, 6), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def labels_file(tmp_path: Path) -> Path:
    path = tmp_path / "labels.txt"
    path.write_text("cat\ndog\nbird\n", encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path: Path, labels_file: Path) -> SnapClassifySettings:
    return SnapClassifySettings(
        labels_path=labels_file,
        model_path=tmp_path / "missing.tflite",
        classifier_backend="litert",
    )


class FakeInterpreter:
    """Stand-in for the LiteRT interpreter with a single input and output."""

    input_shape = (1, 224, 224, 3)
    input_dtype = np.uint8
    output: np.ndarray = np.array([[0, 255]], dtype=np.uint8)
    quantization = (1.0 / 255.0, 0)
    instances: List["FakeInterpreter"] = []

    def __init__(self, model_path: str) -> None:
        self.model_path = model_path
        self.tensors: Dict[int, np.ndarray] = {}
        self.invocations = 0
        type(self).instances.append(self)

    def allocate_tensors(self) -> None:
        pass

    def get_input_details(self) -> List[dict]:
        return [{"index": 0, "shape": np.array(self.input_shape), "dtype": self.input_dtype}]

    def get_output_details(self) -> List[dict]:
        return [{"index": 1, "quantization": self.quantization}]

    def set_tensor(self, index: int, value: np.ndarray) -> None:
        self.tensors[index] = value

    def invoke(self) -> None:
        self.invocations += 1

    def get_tensor(self, index: int) -> np.ndarray:
        return self.output


def write_model(path: Path, labels: Optional[Sequence[str]] = None) -> Path:
    """Write a placeholder model, optionally with a packed label file."""

    path.write_bytes(b"TFL3 placeholder flatbuffer")
    if labels is not None:
        with zipfile.ZipFile(path, "a") as archive:
            archive.writestr("labels.txt", "\n".join(labels) + "\n")
    return path


@pytest.fixture
def fake_interpreter(monkeypatch: pytest.MonkeyPatch):
    """Install a fresh ``FakeInterpreter`` subclass as the LiteRT runtime."""

    class Interpreter(FakeInterpreter):
        instances: List[FakeInterpreter] = []

    monkeypatch.setattr("snapclassify.classification.classifier.Interpreter", Interpreter)
    return Interpreter


@pytest.fixture
def fixed_backend(monkeypatch: pytest.MonkeyPatch):
    """Register ``FixedScoreClassifier`` in the shared registry for one test."""

    monkeypatch.setitem(REGISTRY._backends, FixedScoreClassifier.backend_name, FixedScoreClassifier)
    return FixedScoreClassifier
