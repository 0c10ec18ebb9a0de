"""
Random number generation utilities.

Map generation draws from a single process-wide NumPy generator that is
created without a seed, so two runs never produce the same map. Every
random operation also accepts an explicit generator, which is how tests
get repeatable draws.
"""

from typing import Optional

import numpy as np

# Global generator instance
_rng: Optional[np.random.Generator] = None


def get_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """
    Resolve the generator to draw from.

    Args:
        rng: Explicit generator; returned unchanged when given

    Returns:
        ``rng`` if provided, otherwise the shared unseeded generator
    """
    global _rng
    if rng is not None:
        return rng
    if _rng is None:
        _rng = np.random.default_rng()
    return _rng
