"""Offscreen color ramps for gradient legends.

A ramp samples a color function at n evenly spaced points of [0, 1] into
an n x 1 Pillow image, which legends embed as a PNG data URL and stretch
across the plot area.
"""

import base64
import io
import logging
from typing import Callable

import numpy as np
from PIL import Image

from .colors import parse_color

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 256


def ramp(color: Callable[[float], str], n: int = DEFAULT_SAMPLES) -> Image.Image:
    """Sample a color function into an n x 1 RGB image.

    Texel i holds color(i / (n - 1)); a single texel holds color(0).

    Args:
        color: Function mapping t in [0, 1] to a color string
        n: Number of texels (at least 1)

    Returns:
        Pillow image of size (n, 1)

    Raises:
        ValueError: If n < 1 or color returns an unparseable value
    """
    if n < 1:
        raise ValueError(f"Ramp needs at least one sample, got {n}")

    pixels = np.zeros((1, n, 3), dtype=np.uint8)
    for i, t in enumerate(np.linspace(0.0, 1.0, n)):
        sample = color(float(t))
        if sample is None:
            raise ValueError(f"Color function returned no color at t={t:.4f}")
        pixels[0, i] = parse_color(sample)

    logger.debug(f"Sampled ramp with {n} texels")
    return Image.fromarray(pixels)


def to_data_url(image: Image.Image) -> str:
    """Encode an image as a base64 PNG data URL."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


def from_data_url(url: str) -> Image.Image:
    """Decode a PNG data URL produced by to_data_url().

    Raises:
        ValueError: If the URL is not a base64 PNG data URL
    """
    prefix = "data:image/png;base64,"
    if not url.startswith(prefix):
        raise ValueError("Not a base64 PNG data URL")
    return Image.open(io.BytesIO(base64.b64decode(url[len(prefix):])))
