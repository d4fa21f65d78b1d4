"""Random string generation (not suitable for secrets or tokens)."""

import random
import time

ALPHABET = "1234567890abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def random_string(length: int, rng: random.Random | None = None) -> str:
    """
    Generate a random alphanumeric string

    Characters are drawn uniformly, with replacement, from the 62 digits and
    ASCII letters. Without an explicit rng a fresh generator is seeded from the
    current time on every call; use the secrets module for anything security
    related.

    Args:
        length: Number of characters to return
        rng: Optional random generator to draw from

    Returns:
        String of exactly length characters
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    if rng is None:
        rng = random.Random(time.time_ns())

    return "".join(rng.choice(ALPHABET) for _ in range(length))
