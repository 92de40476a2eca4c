"""Deterministic seeding utilities for reproducibility.

Provides a single function to set seeds across all random number generators
used in the project: the default generator behind ``shuffle``, Python's
random and NumPy.
"""

import logging
import random
from typing import Optional

import numpy as np

from poker_hands.rules.deck import seed_default_rng

logger = logging.getLogger(__name__)


def set_seed(seed: Optional[int] = None) -> int:
    """Set random seeds for reproducibility across all RNGs.

    Sets seeds for:
    - The default generator ``shuffle`` uses when called without ``rng``
    - Python's built-in random module
    - NumPy's legacy global random state

    Generators passed explicitly to ``shuffle`` are not affected.

    Args:
        seed: The seed value to use. If None, a random seed will be generated
              and returned for later reproducibility.

    Returns:
        The seed value that was used (useful when seed=None was passed).

    Example:
        >>> from poker_hands import set_seed
        >>> set_seed(42)  # Deterministic
        42
    """
    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    seed_default_rng(seed)
    random.seed(seed)
    np.random.seed(seed)

    logger.debug("Seeded shuffle, random and numpy with %d", seed)
    return seed
