"""Unit tests for the domain models

Test coverage includes:

1. Click limits
   - Unlimited never exhausts and displays as infinity.
   - Limited counts down, exhausts at 0 and rejects negative or non-int counts.

2. LinkRecord
   - new() mirrors max clicks into remaining clicks and applies the TTL.
   - clicked() returns a decremented copy, leaving the original untouched.
   - Invariants (limit kinds, remaining <= max, expiry after creation) are enforced.
   - is_expired() is strict.
"""

from dataclasses import FrozenInstanceError, replace
from datetime import timedelta

import pytest

from clickshortener.models import UNLIMITED, Limited, LinkRecord, Unlimited, click_limit


# -------------------------------
# 1. Click limits
# -------------------------------


def test_unlimited_is_never_exhausted():
    assert UNLIMITED.is_exhausted is False
    assert UNLIMITED.decremented() is UNLIMITED
    assert str(UNLIMITED) == '∞'


def test_limited_counts_down_to_exhaustion():
    limit = Limited(1)
    assert limit.is_exhausted is False
    assert limit.decremented() == Limited(0)
    assert limit.decremented().is_exhausted is True
    assert str(limit) == '1'


@pytest.mark.parametrize('count', [-1, -100])
def test_limited_rejects_negative_counts(count):
    with pytest.raises(ValueError):
        Limited(count)


@pytest.mark.parametrize('count', [None, '3', 2.5, True])
def test_limited_rejects_non_integer_counts(count):
    with pytest.raises(TypeError):
        Limited(count)


def test_click_limit_maps_none_to_unlimited():
    assert click_limit(None) == Unlimited()
    assert click_limit(5) == Limited(5)


# -------------------------------
# 2. LinkRecord
# -------------------------------


def test_new_record_mirrors_limit_and_applies_ttl(make_record, created_at, ttl):
    record = make_record(max_clicks=3)

    assert record.max_clicks == Limited(3)
    assert record.remaining_clicks == Limited(3)
    assert record.created_at == created_at
    assert record.expires_at == created_at + ttl


def test_clicked_returns_decremented_copy(make_record):
    record = make_record(max_clicks=2)
    clicked = record.clicked()

    assert clicked.remaining_clicks == Limited(1)
    assert record.remaining_clicks == Limited(2)
    assert clicked.max_clicks == Limited(2)


def test_clicked_unlimited_record_stays_unlimited(make_record):
    record = make_record(max_clicks=None)
    assert record.clicked().remaining_clicks is UNLIMITED


def test_record_is_frozen(make_record):
    record = make_record()
    with pytest.raises(FrozenInstanceError):
        record.target = 'https://evil.example.com'


def test_record_rejects_mixed_limit_kinds(make_record):
    with pytest.raises(ValueError, match='same kind'):
        replace(make_record(max_clicks=3), remaining_clicks=UNLIMITED)


def test_record_rejects_remaining_above_max(make_record):
    with pytest.raises(ValueError, match='exceed'):
        replace(make_record(max_clicks=3), remaining_clicks=Limited(4))


def test_record_rejects_expiry_before_creation(make_record, created_at):
    with pytest.raises(ValueError, match='Expiry'):
        replace(make_record(), expires_at=created_at)


def test_is_expired_is_strict(make_record):
    record = make_record()
    assert record.is_expired(record.expires_at) is False
    assert record.is_expired(record.expires_at + timedelta(microseconds=1)) is True
    assert record.is_expired(record.created_at) is False


def test_new_with_non_positive_ttl_fails(owner_id, created_at):
    with pytest.raises(ValueError):
        LinkRecord.new('abc12345', 'https://example.com', owner_id, None, created_at, timedelta(0))
