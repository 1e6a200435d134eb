# renderer/image_io.py
import os
from PIL import Image
import numpy as np

def save_png(image: np.ndarray, path: str):
    """
    Save a (width x height x 3) uint8 render as a PNG.

    Args:
        image: Array indexed [x, y], y = 0 being the top row
        path: Destination file

    Raises:
        FileNotFoundError: If the destination directory doesn't exist
    """
    directory = os.path.dirname(path)
    if directory and not os.path.isdir(directory):
        raise FileNotFoundError(f"Output directory not found: {directory}")

    # Pillow wants rows first
    rows = np.ascontiguousarray(np.transpose(image, (1, 0, 2)).astype(np.uint8))
    Image.fromarray(rows).save(path, format="PNG")

def load_ppm(path: str) -> np.ndarray:
    """
    Load a PPM (or any Pillow-readable image) into the [x, y] layout used by
    the renderer.

    Raises:
        FileNotFoundError: If the image file doesn't exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image file not found: {path}")

    with Image.open(path) as img:
        if img.mode != 'RGB':
            img = img.convert('RGB')
        rows = np.asarray(img, dtype=np.uint8)
    return np.ascontiguousarray(np.transpose(rows, (1, 0, 2)))
