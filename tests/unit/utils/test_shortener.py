"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a string of the requested length.

2. Randomness
   - Repeated calls produce distinct identifiers.
   - Leading zero digits still produce fixed-length output.

3. Error handling
   - Non-integer and non-positive lengths raise exceptions.

4. Output format
   - All characters belong to the Base62 alphabet.

5. Performance sanity
   - The function executes efficiently for a large number of iterations.
"""

import string
import time

import pytest

from cloudpaste.utils import generate_shortcode
from cloudpaste.utils import shortener


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_generate_shortcode_returns_string():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == 8


@pytest.mark.parametrize('length', [1, 7, 10, 32])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(length=length)) == length


# -------------------------------
# 2. Randomness
# -------------------------------


def test_generate_shortcode_is_not_repeated():
    results = {generate_shortcode() for _ in range(10_000)}
    assert len(results) == 10_000


@pytest.mark.parametrize(
    'value, expected',
    [
        (0, 'aaaaaaaa'),
        (1, 'aaaaaaab'),
        (62, 'aaaaaaba'),
        (62**8 - 1, '99999999'),
    ],
)
def test_generate_shortcode_encoding(monkeypatch, value, expected):
    """Random values are encoded most significant digit first, zero-padded."""
    monkeypatch.setattr(shortener.secrets, 'randbelow', lambda upper: value)
    assert generate_shortcode() == expected


def test_generate_shortcode_draws_from_full_range(monkeypatch):
    bounds = []

    def randbelow(upper):
        bounds.append(upper)
        return 0

    monkeypatch.setattr(shortener.secrets, 'randbelow', randbelow)
    generate_shortcode(length=5)

    assert bounds == [62**5]


# -------------------------------
# 3. Error handling
# -------------------------------


@pytest.mark.parametrize('length', [None, '8', 8.0, True])
def test_invalid_length_type_raises_error(length):
    with pytest.raises(TypeError):
        generate_shortcode(length=length)


@pytest.mark.parametrize('length', [0, -1])
def test_invalid_length_value_raises_error(length):
    with pytest.raises(ValueError):
        generate_shortcode(length=length)


# -------------------------------
# 4. Output format validation
# -------------------------------


def test_generate_shortcode_is_base62_safe():
    alphabet = set(string.ascii_letters + string.digits)
    for _ in range(1_000):
        assert set(generate_shortcode()) <= alphabet


# -------------------------------
# 5. Performance sanity check
# -------------------------------


@pytest.mark.parametrize('iterations', [40, 400, 4000])
def test_generate_shortcode_performance(iterations):
    """Ensure id generation won't bottleneck paste creation."""
    start = time.perf_counter()
    for _ in range(iterations):
        generate_shortcode()
    duration = time.perf_counter() - start
    assert duration < 1.0
