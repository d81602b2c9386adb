"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. get_short_url() builds the display form of a slug

2. extract_slug() reduces user input to a slug
   - Short forms with the display prefix or an http(s) scheme.
   - Bare slugs are returned unchanged.

3. validate_target_url() accepts only absolute URLs

4. parse_click_limit() accepts positive integers only

5. parse_owner_id() accepts UUIDs only

6. format_timestamp() renders UTC
"""

from datetime import datetime, timedelta, timezone, UTC
from uuid import UUID

import pytest
from freezegun import freeze_time

from clickshortener.exceptions import InvalidIdentityError, InvalidLimitError, InvalidURLError
from clickshortener.utils.helpers import (
    extract_slug,
    format_timestamp,
    get_short_url,
    parse_click_limit,
    parse_owner_id,
    utcnow,
    validate_target_url,
)


# -------------------------------
# 1. get_short_url()
# -------------------------------


def test_get_short_url():
    assert get_short_url('Ab9ZxQ1k') == 'clck.ru/Ab9ZxQ1k'


# -------------------------------
# 2. extract_slug()
# -------------------------------


@pytest.mark.parametrize(
    'raw, expected',
    [
        ('clck.ru/Ab9ZxQ1k', 'Ab9ZxQ1k'),
        ('https://clck.ru/Ab9ZxQ1k', 'Ab9ZxQ1k'),
        ('http://clck.ru/Ab9ZxQ1k', 'Ab9ZxQ1k'),
        ('Ab9ZxQ1k', 'Ab9ZxQ1k'),
        ('  Ab9ZxQ1k  ', 'Ab9ZxQ1k'),
        ('clck.ru/', 'clck.ru/'),
    ],
)
def test_extract_slug(raw, expected):
    assert extract_slug(raw) == expected


# -------------------------------
# 3. validate_target_url()
# -------------------------------


@pytest.mark.parametrize(
    'url',
    [
        'https://example.com',
        'http://example.com/path?query=1#frag',
        'https://www.baeldung.com/java-9-http-client',
        'ftp://files.example.com/archive.zip',
        'https://[::1]:8080/',
    ],
)
def test_validate_target_url_accepts_absolute_urls(url):
    assert validate_target_url(url) == url


@pytest.mark.parametrize(
    'url',
    [
        '',
        'example.com',
        '/relative/path',
        'mailto:someone@example.com',
        'https://',
        'https://exa mple.com',
        'http://[::1',
        None,
    ],
)
def test_validate_target_url_rejects_non_absolute_urls(url):
    with pytest.raises(InvalidURLError):
        validate_target_url(url)


# -------------------------------
# 4. parse_click_limit()
# -------------------------------


@pytest.mark.parametrize('raw, expected', [(None, None), ('1', 1), ('25', 25), (3, 3)])
def test_parse_click_limit(raw, expected):
    assert parse_click_limit(raw) == expected


@pytest.mark.parametrize('raw', ['0', '-5', 'abc', '2.5', '', 0, -1, 2.5, True])
def test_parse_click_limit_rejects_invalid_values(raw):
    with pytest.raises(InvalidLimitError):
        parse_click_limit(raw)


# -------------------------------
# 5. parse_owner_id()
# -------------------------------


def test_parse_owner_id_from_string():
    assert parse_owner_id('11111111-1111-1111-1111-111111111111') == UUID('11111111-1111-1111-1111-111111111111')


def test_parse_owner_id_passes_uuids_through():
    owner_id = UUID('11111111-1111-1111-1111-111111111111')
    assert parse_owner_id(owner_id) is owner_id


@pytest.mark.parametrize('raw', ['', 'not-a-uuid', '1234', None])
def test_parse_owner_id_rejects_invalid_identities(raw):
    with pytest.raises(InvalidIdentityError):
        parse_owner_id(raw)


# -------------------------------
# 6. format_timestamp() / utcnow()
# -------------------------------


def test_format_timestamp_renders_utc():
    moment = datetime(2026, 10, 16, 15, 30, 0, tzinfo=timezone(timedelta(hours=3)))
    assert format_timestamp(moment) == '2026-10-16 12:30:00'


@freeze_time('2026-10-16 12:00:00')
def test_utcnow_is_timezone_aware():
    now = utcnow()
    assert now == datetime(2026, 10, 16, 12, 0, 0, tzinfo=UTC)
    assert now.tzinfo is not None
