"""Slug generation utility

This module provides a helper function for generating short, random,
fixed-length identifiers for shortened links.

Functions:
    generate_slug(length=8):
        Generate a random Base62 string suitable for use as a URL slug.

Example:
    >>> from clickshortener.utils import generate_slug
    >>> generate_slug()
    'q3ZbT9aK'
"""

import secrets
import string

from clickshortener.constants import Slug


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_slug(length: int = Slug.LENGTH) -> str:
    """Generate a random Base62 slug.

    Each character is drawn independently and uniformly from the Base62
    alphabet using the operating system's CSPRNG (`secrets`). The function
    keeps no state, so concurrent callers never interfere with each other.

    Args:
        length (int, optional):
            Number of characters in the slug. Defaults to 8.

    Returns:
        str: A random alphanumeric slug of exactly `length` characters.

    Example:
        >>> len(generate_slug(length=8))
        8

    NOTE:
        - Uniqueness is not guaranteed here. The registry retries on
          collision, which with 62**8 possible slugs is practically never.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))
