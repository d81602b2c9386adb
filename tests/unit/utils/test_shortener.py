"""Unit tests for the generate_slug function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a string of the expected length.

2. Output format
   - All characters must belong to the Base62 alphabet.

3. Randomness
   - Consecutive calls produce different slugs.
   - Characters are drawn from the secrets module.

4. Error handling
   - Invalid lengths raise TypeError or ValueError.

5. Thread safety
   - Concurrent callers all receive well-formed slugs.
"""

import string
from concurrent.futures import ThreadPoolExecutor

import pytest

from clickshortener.utils import generate_slug
from clickshortener.utils import shortener


# -------------------------------
# 1. Basic functionality and type
# -------------------------------


def test_generate_slug_returns_eight_characters_by_default():
    result = generate_slug()
    assert isinstance(result, str)
    assert len(result) == 8


@pytest.mark.parametrize('length', [1, 7, 12, 32])
def test_generate_slug_respects_length(length):
    assert len(generate_slug(length=length)) == length


# -------------------------------
# 2. Output format validation
# -------------------------------


def test_generate_slug_is_base62_safe():
    alphabet = set(string.ascii_letters + string.digits)
    for _ in range(200):
        assert set(generate_slug()) <= alphabet


def test_alphabet_has_62_characters():
    assert shortener.BASE == 62
    assert len(set(shortener.ALPHABET)) == 62


# -------------------------------
# 3. Randomness
# -------------------------------


def test_generate_slug_is_not_repeated():
    """1000 draws from 62**8 slugs should never collide."""
    slugs = {generate_slug() for _ in range(1000)}
    assert len(slugs) == 1000


def test_generate_slug_uses_secrets_choice(monkeypatch):
    monkeypatch.setattr(shortener.secrets, 'choice', lambda alphabet: 'Z')
    assert generate_slug() == 'ZZZZZZZZ'


# -------------------------------
# 4. Error handling
# -------------------------------


@pytest.mark.parametrize('length', [None, '8', 8.0, True])
def test_invalid_length_type_raises_error(length):
    with pytest.raises(TypeError):
        generate_slug(length=length)


@pytest.mark.parametrize('length', [0, -1])
def test_invalid_length_value_raises_error(length):
    with pytest.raises(ValueError):
        generate_slug(length=length)


# -------------------------------
# 5. Thread safety
# -------------------------------


def test_generate_slug_from_many_threads():
    with ThreadPoolExecutor(max_workers=8) as pool:
        slugs = list(pool.map(lambda _: generate_slug(), range(500)))

    assert all(len(slug) == 8 for slug in slugs)
    assert len(set(slugs)) == 500
