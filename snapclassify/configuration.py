"""Mini README: Centralised runtime configuration for SnapClassify.

Structure:
    * SnapClassifySettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor so validation runs once per process.

Usage:
    Every value can be overridden with a ``SNAPCLASSIFY_`` prefixed
    environment variable or a ``.env`` file, e.g.
    ``SNAPCLASSIFY_LABELS_PATH=/opt/models/labels.txt``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class SnapClassifySettings(BaseSettings):
    """Runtime configuration for the classifier service and its interfaces."""

    environment: str = Field(
        "development",
        description="Environment label; \"production\" disables auto-reload when serving.",
    )
    labels_path: Path = Field(
        Path("assets/labels.txt"),
        description="Text file with one class label per line, line N naming class index N.",
    )
    model_path: Path = Field(
        Path("assets/mobilenet_quant_v1_224.tflite"),
        description="Location of the image classification model.",
    )
    model_labels_path: Optional[Path] = Field(
        None,
        description=(
            "Labels reported by the classifier itself, one per line. When unset the"
            " labels packed into the model metadata are used."
        ),
    )
    classifier_backend: str = Field(
        "litert",
        description="Registered classifier backend used to run the model.",
    )
    max_results: int = Field(
        3,
        description="Maximum categories reported per classification head (0 for no limit).",
        ge=0,
    )
    score_threshold: float = Field(
        0.3,
        description="Categories scoring below this value are not reported.",
        ge=0.0,
        le=1.0,
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field("INFO", description="Root logging level.")

    class Config:
        env_prefix = "SNAPCLASSIFY_"
        env_file = ".env"
        case_sensitive = False

    @validator("labels_path", "model_path", "model_labels_path", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        """Expand user directories; existence is checked by the consumers."""

        if value is None or value == "":
            return None
        return Path(value).expanduser()

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache()
def get_settings() -> SnapClassifySettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SnapClassifySettings()
