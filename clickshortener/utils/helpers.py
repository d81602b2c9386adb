"""Helper utilities for link handling.

Functions:
    utcnow() -> datetime
        Current moment as an aware UTC datetime
    get_short_url(slug) -> str
        Get string representation of short URL for a given slug
    extract_slug(raw) -> str
        Extract the slug from a short URL, full URL, or bare slug
    validate_target_url(url) -> str
        Ensure a target URL is absolute (scheme + host)
    parse_click_limit(raw) -> int | None
        Parse an optional click limit into a positive integer
    parse_owner_id(raw) -> UUID
        Parse an owner identity token
    format_timestamp(moment) -> str
        Render a datetime for display

Example:
    >>> get_short_url('Ab9ZxQ1k')
    'clck.ru/Ab9ZxQ1k'

    >>> extract_slug('https://clck.ru/Ab9ZxQ1k')
    'Ab9ZxQ1k'

    >>> extract_slug('Ab9ZxQ1k')
    'Ab9ZxQ1k'
"""

import urllib.parse
from datetime import datetime, UTC
from uuid import UUID

from clickshortener.constants import SHORT_BASE, TIMESTAMP_FORMAT
from clickshortener.exceptions import InvalidIdentityError, InvalidLimitError, InvalidURLError


_SHORT_FORM_PREFIXES = ('http://', 'https://', SHORT_BASE)


def utcnow() -> datetime:
    return datetime.now(UTC)


def get_short_url(slug: str) -> str:
    """Get string representation of shortened URL

    Args:
        slug (str): slug

    Returns:
        str: short url string representation
    """
    return f'{SHORT_BASE}{slug}'


def extract_slug(raw: str) -> str:
    """Extract the slug from user input

    Short forms (`clck.ru/<slug>`, `http(s)://<host>/<slug>`) are reduced to
    the part after the last slash. Anything else is taken as a bare slug.

    Args:
        raw (str): short URL or slug as typed by the user

    Returns:
        str: slug
    """
    raw = raw.strip()
    if raw.startswith(_SHORT_FORM_PREFIXES):
        _, _, tail = raw.rpartition('/')
        if tail:
            return tail
    return raw


def validate_target_url(url: str) -> str:
    """Ensure the target URL is absolute

    Args:
        url (str): URL to shorten

    Returns:
        str: the same URL, unchanged

    Raises:
        InvalidURLError: if the URL is malformed or lacks a scheme or host
    """
    if not isinstance(url, str) or not url or any(ch.isspace() for ch in url):
        raise InvalidURLError(f'URL must be absolute (scheme + host): {url!r}')

    try:
        components = urllib.parse.urlsplit(url)
        hostname = components.hostname
    except ValueError as e:
        raise InvalidURLError(f'Malformed URL: {url!r}') from e

    if not components.scheme or not hostname:
        raise InvalidURLError(f'URL must be absolute (scheme + host): {url!r}')
    return url


def parse_click_limit(raw: str | int | None) -> int | None:
    """Parse an optional click limit

    Args:
        raw (str | int | None): limit as given by the caller, None for unlimited

    Returns:
        int | None: positive limit, or None when unlimited

    Raises:
        InvalidLimitError: if the limit is not an integer >= 1
    """
    if raw is None:
        return None
    if isinstance(raw, (bool, float)):
        raise InvalidLimitError(f'Click limit must be an integer >= 1 (given value: {raw!r}).')

    try:
        limit = int(raw)
    except (TypeError, ValueError) as e:
        raise InvalidLimitError(f'Click limit must be an integer >= 1 (given value: {raw!r}).') from e

    if limit < 1:
        raise InvalidLimitError(f'Click limit must be an integer >= 1 (given value: {raw!r}).')
    return limit


def parse_owner_id(raw: str | UUID) -> UUID:
    """Parse an owner identity token

    Raises:
        InvalidIdentityError: if the token is not a UUID
    """
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw).strip())
    except ValueError as e:
        raise InvalidIdentityError(f'Invalid user UUID: {raw!r}') from e


def format_timestamp(moment: datetime) -> str:
    return moment.astimezone(UTC).strftime(TIMESTAMP_FORMAT)
