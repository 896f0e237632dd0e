"""Mini README: Image decoding and tensor preparation.

Structure:
    * decode_image - turn uploaded bytes into an RGB Pillow image.
    * to_input_tensor - resize and batch an image for a model input.
"""

from __future__ import annotations

import io

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def decode_image(data: bytes) -> Image.Image:
    """Decode encoded image bytes (JPEG, PNG, ...) into an RGB image."""

    if not data:
        raise ValueError("Unable to decode image: no data received")
    try:
        with Image.open(io.BytesIO(data)) as image:
            rgb = image.convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as error:
        raise ValueError(f"Unable to decode image: {error}") from error
    LOGGER.debug("Decoded %s byte image into %sx%s", len(data), rgb.width, rgb.height)
    return rgb


def to_input_tensor(
    image: Image.Image, height: int, width: int, dtype: np.dtype = np.uint8
) -> np.ndarray:
    """Return a ``(1, height, width, 3)`` batch for the model input.

    Float inputs are scaled to ``[-1, 1]`` as expected by MobileNet models.
    """

    resized = image.convert("RGB").resize((width, height), Image.Resampling.BILINEAR)
    pixels = np.asarray(resized, dtype=np.uint8)
    if np.issubdtype(np.dtype(dtype), np.floating):
        tensor = (pixels.astype(np.float32) - 127.5) / 127.5
        tensor = tensor.astype(dtype)
    else:
        tensor = pixels.astype(dtype)
    return np.expand_dims(tensor, axis=0)
