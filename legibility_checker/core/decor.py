"""Reproducible placement for decorative template shapes.

Positions come from numpy's default_rng seeded with a hash of a stable
per-slide key, so the same slide always renders the same way.
"""

import hashlib

import numpy as np


def seed_for(slide_key: str) -> int:
    digest = hashlib.sha256(slide_key.encode('utf-8')).digest()
    return int.from_bytes(digest[:8], 'big')


def decor_positions(
    slide_key: str,
    count: int,
    width: float = 100.0,
    height: float = 100.0,
) -> list[tuple[float, float, float]]:
    """Return (x, y, rotation_degrees) for count shapes inside width x height."""
    if count <= 0:
        return []
    rng = np.random.default_rng(seed_for(slide_key))
    xs = rng.uniform(0.0, width, count)
    ys = rng.uniform(0.0, height, count)
    angles = rng.uniform(0.0, 360.0, count)
    return [(round(float(x), 2), round(float(y), 2), round(float(a), 1)) for x, y, a in zip(xs, ys, angles)]
