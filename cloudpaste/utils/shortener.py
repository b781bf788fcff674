"""Paste identifier generation utility

This module provides a helper function for generating random, fixed-length,
URL-safe paste identifiers.

Functions:
    generate_shortcode(length=8):
        Generate a random Base62 identifier suitable for a URL path segment.

Example:
    >>> from cloudpaste.utils import generate_shortcode
    >>> generate_shortcode()
    'Xq3bT9aZ'
"""

import secrets
import string


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_shortcode(length: int = 8) -> str:
    """Generate a random, fixed-length Base62 identifier.

    A uniformly random integer is drawn from [0, BASE^length) with the `secrets`
    CSPRNG and encoded into exactly `length` Base62 digits (A-Z, a-z, 0-9).

    Args:
        length (int, optional):
            Number of characters in the identifier.
            Defaults to 8 (62^8 ~ 2.2 * 10^14 possible values).

    Returns:
        str: A random alphanumeric identifier of exactly `length` characters.

    Example:
        >>> len(generate_shortcode(length=10))
        10

    NOTE:
        - Identifiers are not checked against the data store. With 8 characters,
          the chance of a collision stays below one in a million until roughly
          20,000 pastes exist at the same time; raise `length` for bigger volumes.
        - The output is unpredictable (CSPRNG), so ids can't be enumerated.
        - The alphabet is Base62 safe: [a-zA-Z0-9].
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    value = secrets.randbelow(BASE**length)

    # Base62 encoding:
    # 1- Encode the random value into base62 digits, least significant first
    # 2- Reverse order to put the most significant digit first (reversed())
    # 3- Join characters into a single string (''.join())
    # NOTE: leading zero digits encode as ALPHABET[0], so the output is always `length` long
    return ''.join(reversed([ALPHABET[(value // BASE**i) % BASE] for i in range(length)]))
