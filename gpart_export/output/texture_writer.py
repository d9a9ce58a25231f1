"""Texture side-channel: write a renderer's main texture next to the export."""

import warnings
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from ..core.errors import TextureExportWarning
from ..source.accessor import EffectSource


def _to_uint8(pixels: np.ndarray) -> np.ndarray:
    arr = np.asarray(pixels)
    if np.issubdtype(arr.dtype, np.floating):
        arr = np.clip(arr, 0.0, 1.0) * 255.0 + 0.5
    return arr.astype(np.uint8)


def export_texture(source: EffectSource, texture_name: str,
                   output_dir: Union[str, Path]) -> Optional[Path]:
    """Write ``<texture_name>.png`` into output_dir.

    Returns the written path, or None if the texture could not be resolved,
    read or encoded. Failures are reported as TextureExportWarning only.
    """
    if not texture_name:
        return None

    out_path = Path(output_dir) / f"{texture_name}.png"
    try:
        texture = source.find_texture(texture_name)
        if texture is not None:
            pixels = _to_uint8(texture.read_pixels())
            img = Image.fromarray(pixels)
            img.save(str(out_path))
    except Exception as e:
        warnings.warn(f"Could not export texture '{texture_name}': {e}", TextureExportWarning)
        return None

    if texture is None:
        warnings.warn(f"Could not export texture '{texture_name}': not found on the renderer",
                      TextureExportWarning)
        return None

    print(f"Texture exported to: {out_path}")
    return out_path
