# main.py
import sys
from typing import Optional
from renderer.raytracer import Renderer
from renderer.image_io import save_png
from renderer.preview import show_image

IMAGE_WIDTH = 200
IMAGE_HEIGHT = 100
OUTPUT_PATH = "output/image.ppm"


def print_progress(j: int):
    print(f"\rScanlines remaining: {j} ", end="", flush=True)


def main(output_path: str = OUTPUT_PATH, png_path: Optional[str] = None,
         preview: bool = False) -> int:
    """
    Renders the scene to `output_path` as a P3 PPM.
    Returns the process exit status: 0 on success, 1 if the output file
    cannot be opened.
    """
    renderer = Renderer(IMAGE_WIDTH, IMAGE_HEIGHT)

    try:
        file = open(output_path, "w", newline="\n")
    except OSError as e:
        print(f"Failed to open {output_path} for writing: {e}", file=sys.stderr)
        return 1

    with file:
        renderer.render(file, progress=print_progress)
    print("\nDone.")

    if png_path is not None or preview:
        image = renderer.render_to_array()
        if png_path is not None:
            save_png(image, png_path)
            print(f"Saved PNG to {png_path}")
        if preview:
            show_image(image, window_size=(IMAGE_WIDTH * 4, IMAGE_HEIGHT * 4))

    return 0


if __name__ == "__main__":
    sys.exit(main())
