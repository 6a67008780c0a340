import math

from matrices import identity
from rays import Ray
from tuples import normalize, point


class Camera:
    """
    Pinhole camera looking down -z from the origin of its own space.

    The image plane sits one unit in front of the eye. `transform` is the
    view transform (world to camera); its inverse carries generated rays
    back into the world.
    """

    def __init__(self, hsize, vsize, field_of_view, transform=None):
        if hsize <= 0 or vsize <= 0:
            raise ValueError("Camera needs a positive image size, got {}x{}".format(hsize, vsize))
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else identity()

        self.half_width = None
        self.half_height = None
        self.pixel_size = None
        self.setup()

    @property
    def transform(self):
        return self._transform

    @transform.setter
    def transform(self, matrix):
        inverse = matrix.inverse()
        self._transform = matrix
        self.inverse = inverse

    def setup(self):
        """Compute the half extents of the image plane and the size of one pixel."""
        half_view = math.tan(self.field_of_view / 2)
        aspect_ratio = self.hsize / self.vsize

        if aspect_ratio >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect_ratio
        else:
            self.half_width = half_view * aspect_ratio
            self.half_height = half_view

        self.pixel_size = (self.half_width * 2) / self.hsize

    def ray_for_pixel(self, px, py):
        """Generate the world-space ray through the center of pixel (px, py)."""
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self.inverse @ point(world_x, world_y, -1)
        origin = self.inverse @ point(0, 0, 0)
        direction = normalize(pixel - origin)
        return Ray(origin, direction)

    def rays_for_rows(self, y_start, y_end):
        """Yield (x, y, ray) for every pixel of rows y_start..y_end-1 in row-major order."""
        for y in range(y_start, y_end):
            for x in range(self.hsize):
                yield x, y, self.ray_for_pixel(x, y)

    def render(self, world, num_workers=None):
        """Render the world into a new Canvas.

        With num_workers set, rows are split across a process pool.
        """
        from ray_tracer import render, render_parallel

        if num_workers is None:
            return render(self, world)
        return render_parallel(self, world, num_workers)
