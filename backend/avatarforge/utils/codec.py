"""Lossless PNG encoding of RGBA numpy buffers."""

from __future__ import annotations

import io

import numpy as np
from numpy.typing import NDArray
from PIL import Image

PNG_CONTENT_TYPE = "image/png"


def encode_png(buf: NDArray[np.uint8]) -> bytes:
    """Encode an (H, W, 4) uint8 buffer."""
    if buf.ndim != 3 or buf.shape[2] != 4:
        raise ValueError(f"Expected an (H, W, 4) RGBA buffer, got shape {buf.shape}")
    img = Image.fromarray(np.ascontiguousarray(buf, dtype=np.uint8))
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()


def decode_png(data: bytes) -> NDArray[np.uint8]:
    """Decode any Pillow-readable image to an (H, W, 4) uint8 buffer."""
    with Image.open(io.BytesIO(data)) as img:
        return np.array(img.convert("RGBA"), dtype=np.uint8)
