import logging

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

PPM_MAX_VALUE = 255
PPM_LINE_WIDTH = 70


class Canvas:
    """A width x height grid of unclamped float RGB colors.

    Pixels live in a (height, width, 3) array, indexed as [y, x].
    """

    def __init__(self, width, height, fill=(0.0, 0.0, 0.0)):
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 3), dtype=np.float64)
        self.pixels[:, :] = fill

    def _check_bounds(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("pixel ({}, {}) outside {}x{} canvas".format(x, y, self.width, self.height))

    def write_pixel(self, x, y, color):
        self._check_bounds(x, y)
        self.pixels[y, x] = color

    def pixel_at(self, x, y):
        self._check_bounds(x, y)
        return self.pixels[y, x].copy()

    def to_bytes(self, max_value=PPM_MAX_VALUE):
        """Clamp to [0, 1], scale to [0, max_value] and round to integers."""
        scaled = np.floor(np.clip(self.pixels, 0.0, 1.0) * max_value + 0.5)
        return scaled.astype(np.int64)

    def to_ppm(self):
        """Encode the canvas as plain-text PPM (P3), wrapping lines at 70 characters."""
        lines = ["P3", "{} {}".format(self.width, self.height), str(PPM_MAX_VALUE)]
        values = self.to_bytes()

        for row in values:
            line = ""
            for value in row.ravel():
                token = str(value)
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_LINE_WIDTH:
                    lines.append(line)
                    line = token
                else:
                    line += " " + token
            lines.append(line)

        return "\n".join(lines) + "\n"

    def save_image(self, output_path):
        """Save the canvas to an image file (format taken from the extension)."""
        if str(output_path).lower().endswith(".ppm"):
            with open(output_path, "w") as f:
                f.write(self.to_ppm())
        else:
            image = Image.fromarray(self.to_bytes().astype(np.uint8))
            image.save(output_path)
        logger.info("Image saved to %s", output_path)
