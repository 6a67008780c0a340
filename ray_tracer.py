import logging
import multiprocessing as mp
import time

import numpy as np

from canvas import Canvas

logger = logging.getLogger(__name__)


def render(camera, world):
    """
    Render the world into a Canvas, one pixel at a time in row-major order.
    """
    start_time = time.time()
    width, height = camera.hsize, camera.vsize
    max_depth = world.settings.max_recursions

    logger.info("Rendering %dx%d image, max depth %d", width, height, max_depth)
    canvas = Canvas(width, height)

    for y in range(height):
        row_start = time.time()
        for x in range(width):
            ray = camera.ray_for_pixel(x, y)
            canvas.write_pixel(x, y, world.color_at(ray, max_depth))

        # Progress every 10 rows
        if (y + 1) % 10 == 0 or y == height - 1:
            elapsed = time.time() - start_time
            progress = (y + 1) / height
            eta = (elapsed / progress) * (1 - progress)
            logger.debug("Row %d/%d (%.1f%%) - Row time: %.2fs - ETA: %.0fs",
                         y + 1, height, progress * 100, time.time() - row_start, eta)

    logger.info("Rendering complete in %.1fs", time.time() - start_time)
    return canvas


def _render_row_chunk(args):
    """
    Render rows y_start..y_end-1 of the image.
    Called by multiprocessing pool; each chunk owns a disjoint set of rows.
    """
    y_start, y_end, camera, world = args
    max_depth = world.settings.max_recursions

    colors = np.zeros((y_end - y_start, camera.hsize, 3), dtype=np.float64)
    for x, y, ray in camera.rays_for_rows(y_start, y_end):
        colors[y - y_start, x] = world.color_at(ray, max_depth)

    return (y_start, y_end, colors)


def render_parallel(camera, world, num_workers=None):
    """
    Render the world using multiprocessing (parallel row-based rendering).

    Produces the same canvas as render(); the world is read-only during
    shading, so workers share nothing but their own output rows.

    Args:
        num_workers: number of worker processes (default: CPU count)
    """
    if num_workers is None:
        num_workers = mp.cpu_count()
    if num_workers < 1:
        raise ValueError("num_workers must be at least 1, got {}".format(num_workers))

    start_time = time.time()
    width, height = camera.hsize, camera.vsize
    logger.info("Parallel rendering %dx%d with %d workers...", width, height, num_workers)

    # Divide rows into chunks, 4 chunks per worker for load balancing
    rows_per_chunk = max(1, height // (num_workers * 4))
    chunks = []
    for y_start in range(0, height, rows_per_chunk):
        y_end = min(y_start + rows_per_chunk, height)
        chunks.append((y_start, y_end, camera, world))

    logger.debug("Divided into %d chunks of ~%d rows each", len(chunks), rows_per_chunk)

    pool_start = time.time()
    with mp.Pool(num_workers) as pool:
        results = pool.map(_render_row_chunk, chunks)
    logger.debug("All chunks completed in %.2fs", time.time() - pool_start)

    # Assemble final image
    canvas = Canvas(width, height)
    for y_start, y_end, colors in results:
        canvas.pixels[y_start:y_end] = colors

    logger.info("Parallel rendering complete in %.1fs", time.time() - start_time)
    return canvas
