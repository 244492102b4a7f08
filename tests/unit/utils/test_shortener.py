"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality and determinism
2. Salt variation
3. Edge counters and wrap-around
4. Error handling
5. Output format and length
6. Uniqueness over consecutive counters
"""

import string

import pytest

from urlshortener.utils import generate_shortcode


# -------------------------------
# 1. Basic functionality
# -------------------------------

def test_generate_shortcode_returns_fixed_length_string():
    result = generate_shortcode(123, salt='unit_test_salt', length=7)
    assert isinstance(result, str)
    assert len(result) == 7
    assert result == '0ilAMe2'


def test_generate_shortcode_is_deterministic():
    """Same counter + same salt always produce the same alias."""
    assert generate_shortcode(123, salt='unit_test_salt') == generate_shortcode(123, salt='unit_test_salt')


def test_known_output_regression():
    """Ensure stable output for known inputs (detect logic drift)."""
    assert generate_shortcode(12345, salt='my_secret', length=7) == 'ibCJIAD'


# -------------------------------
# 2. Salt variation
# -------------------------------

def test_different_salts_produce_different_aliases():
    result1 = generate_shortcode(123, salt='unit_test_saltA')
    result2 = generate_shortcode(123, salt='unit_test_saltB')
    assert result1 != result2


# -------------------------------
# 3. Edge cases
# -------------------------------

@pytest.mark.parametrize('counter', [0, 1, 10**6, 2**63 - 1])
def test_generate_shortcode_handles_edge_counters(counter):
    result = generate_shortcode(counter, salt='edge_test')
    assert len(result) == 7


def test_generate_shortcode_wraps_around_for_big_counters():
    """Counters beyond the Base62 space wrap to the same alias."""
    result1 = generate_shortcode(12345, salt='my_secret', length=7)
    result2 = generate_shortcode(62**7 + 12345, salt='my_secret', length=7)
    assert result1 == result2 == 'ibCJIAD'


# -------------------------------
# 4. Error handling
# -------------------------------

@pytest.mark.parametrize('counter', [None, 'abc', 12.34])
def test_invalid_counter_type_raises_error(counter):
    with pytest.raises(TypeError):
        generate_shortcode(counter, salt='unit_test_salt')


def test_negative_counter_raises_error():
    with pytest.raises(ValueError):
        generate_shortcode(-1, salt='unit_test_salt')


@pytest.mark.parametrize('salt', [None, 1, 12.34])
def test_invalid_salt_type_raises_error(salt):
    with pytest.raises(TypeError):
        generate_shortcode(100, salt=salt)


def test_generate_shortcode_accepts_non_ascii_salt():
    """Salts are hashed as UTF-8 bytes."""
    result = generate_shortcode(123, salt='sél-ünïcode')
    assert len(result) == 7
    assert result != generate_shortcode(123, salt='sel-unicode')


def test_empty_salt_raises_error():
    with pytest.raises(ValueError):
        generate_shortcode(100, salt='')


def test_non_coprime_multiplier_raises_error():
    with pytest.raises(ValueError, match='coprime'):
        generate_shortcode(100, salt='unit_test_salt', mult=62)


# -------------------------------
# 5. Output format
# -------------------------------

def test_generate_shortcode_is_base62_safe():
    alphabet = set(string.ascii_letters + string.digits)
    result = generate_shortcode(123, salt='format_test')
    assert all(character in alphabet for character in result)
    assert '/' not in result


@pytest.mark.parametrize('length', [1, 4, 10])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(12345, salt='length_test', length=length)) == length


# -------------------------------
# 6. Uniqueness
# -------------------------------

def test_consecutive_counters_never_collide():
    """The permutation is 1:1 below BASE**length."""
    aliases = {generate_shortcode(i, salt='unique_test') for i in range(1, 10_001)}
    assert len(aliases) == 10_000
