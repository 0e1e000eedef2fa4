#point_sets.py

import time
import numpy as np
import noise
import constants as C

class XorShift64:
    """Marsaglia xorshift generator returning values in [0, upper)."""
    def __init__(self, seed=None, upper=1000):
        if seed is None:
            seed = int(time.time())
        self.state = (seed & C.XORSHIFT_MASK) or C.XORSHIFT_FALLBACK_SEED
        self.upper = upper

    def next(self):
        x = self.state
        x ^= (x << 13) & C.XORSHIFT_MASK
        x ^= x >> 7
        x ^= (x << 17) & C.XORSHIFT_MASK
        self.state = x
        return x % self.upper

def xorshift_points(rng, count):
    return [(rng.next(), rng.next()) for _ in range(count)]

def uniform_points(count, upper, seed=None):
    """Returns `count` integer points drawn uniformly from [0, upper) on both axes."""
    gen = np.random.default_rng(seed)
    coords = gen.integers(0, upper, size=(count, 2))
    return [(int(x), int(y)) for x, y in coords]

def cluster_density(x, y, base=0):
    """Perlin-noise density in [0, 1] used to bias sampling towards clusters."""
    value = noise.pnoise2(
        x * C.CLUSTER_NOISE_SCALE, y * C.CLUSTER_NOISE_SCALE,
        octaves=C.CLUSTER_NOISE_OCTAVES,
        persistence=C.CLUSTER_NOISE_PERSISTENCE,
        lacunarity=C.CLUSTER_NOISE_LACUNARITY,
        base=base,
    )
    normalized = max(0.0, min(1.0, (value + 1) / 2))
    return normalized ** C.CLUSTER_DENSITY_EXPONENT

def clustered_points(count, upper, seed=None):
    """
    Returns `count` integer points in [0, upper) gathered into noise-shaped clusters.

    Candidates are drawn uniformly in batches and kept with probability equal
    to their cluster density (rejection sampling). Duplicates are possible.
    """
    gen = np.random.default_rng(seed)
    base = int(gen.integers(0, 256))
    points = []
    while len(points) < count:
        candidates = gen.integers(0, upper, size=(C.CLUSTER_SAMPLE_BATCH, 2))
        rolls = gen.random(C.CLUSTER_SAMPLE_BATCH)
        for (x, y), roll in zip(candidates, rolls):
            if roll < cluster_density(x, y, base):
                points.append((int(x), int(y)))
                if len(points) == count:
                    break
    return points

def random_query(rng, size=None):
    """
    Builds a query rectangle from rng draws.

    With `size`, the rectangle is a size x size square anchored at a random
    corner. Without it, both axes come from two sorted draws each.
    """
    if size is not None:
        x = rng.next()
        y = rng.next()
        return (x, x + size, y, y + size)
    a, b, c, d = rng.next(), rng.next(), rng.next(), rng.next()
    x1, x2 = min(a, b), max(a, b)
    y1, y2 = min(c, d), max(c, d)
    return (x1, x2, y1, y2)
