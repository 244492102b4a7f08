"""Alias generation utility

This module provides a helper function for generating short, deterministic,
non-sequential aliases based on a numeric counter and a secret salt value.

Functions:
    generate_shortcode(counter, salt='default_salt', length=7, mult=1315423911):
        Generate a short hash suitable for use as a URL alias.

Example:
    >>> from urlshortener.utils import generate_shortcode
    >>> generate_shortcode(12345, salt='my_secret')
    'ibCJIAD'
"""

import math
import string

import xxhash

from urlshortener.constants import Default


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_shortcode(
    counter: int,
    salt: str = Default.SALT,
    length: int = Default.SHORTCODE_LENGTH,
    mult: int = 1315423911,
) -> str:
    """Generate a short, deterministic alias from a counter and salt.

    The counter is pushed through an affine permutation over the fixed
    Base62 space (BASE**length) and then Base62-encoded. The permutation is
    a 1:1 mapping, so distinct counters below BASE**length never share an
    alias. Larger counters wrap around.

    Args:
        counter (int):
            Non-negative integer identifying the association.

        salt (str, optional):
            Secret string used to shift the output space.

        length (int, optional):
            Exact length of the resulting alias. Defaults to 7.

        mult (int, optional):
            Multiplicative factor for the permutation.
            Must be coprime with BASE**length.

    Returns:
        str: Alphanumeric alias of exactly `length` characters.

    Raises:
        TypeError: If counter is not an int or salt is not a str.
        ValueError: If counter is negative, salt is empty, or mult is not
            coprime with the modulo space.

    Example:
        >>> generate_shortcode(12345, salt='my_secret', length=7)
        'ibCJIAD'
    """
    if not isinstance(counter, int):
        raise TypeError(f'Counter must be of type integer (given type: {type(counter)}).')
    if counter < 0:
        raise ValueError(f'Counter must be a non-negative integer (given value: {counter}).')
    if not isinstance(salt, str):
        raise TypeError(f'Salt must be of type string (given type: {type(salt)}).')
    if not salt:
        raise ValueError(f'Salt must be a non-empty string (given value: {salt}).')
    if math.gcd(mult, BASE**length) != 1:
        raise ValueError(f'Multiplicative factor must be coprime with mod ({BASE**length}) (given value: mult={mult}).')

    modulo_space = BASE**length
    # xxhash >= 4 only accepts bytes
    salt_hash = xxhash.xxh64_intdigest(salt.encode('utf-8')) % modulo_space
    permuted = (counter * mult + salt_hash) % modulo_space

    # Most significant digit first, left-padded with ALPHABET[0]
    digits = [ALPHABET[(permuted // BASE**i) % BASE] for i in range(length)]
    return ''.join(reversed(digits)).rjust(length, ALPHABET[0])
