"""Response builders shared by the boundary handlers

Every handler returns a plain dict:

    {'status': 'ok', ...payload}
    {'status': 'redirect', 'location': <target url>, ...}
    {'status': 'error', 'error': <error code>, 'message': <human readable>}

Error codes come from the `error_code` class attribute of the application
and DAO exceptions (e.g. 'InvalidURL', 'NotFound', 'Forbidden').
"""

import functools
import logging
from collections.abc import Callable
from datetime import datetime

from clickshortener.constants import INTERNAL_ERROR, STATUS_ERROR, STATUS_OK, STATUS_REDIRECT
from clickshortener.dao.exceptions import DAOError
from clickshortener.exceptions import ClickShortenerError
from clickshortener.models import LinkRecord
from clickshortener.types import Response
from clickshortener.utils.helpers import format_timestamp, get_short_url


logger = logging.getLogger(__name__)


def response_ok(**payload) -> Response:
    return {'status': STATUS_OK, **payload}


def response_redirect(*, location: str, **payload) -> Response:
    return {'status': STATUS_REDIRECT, 'location': location, **payload}


def response_error(error: Exception | None = None, *, error_code: str | None = None, message: str | None = None) -> Response:
    code = error_code or getattr(error, 'error_code', INTERNAL_ERROR)
    return {
        'status': STATUS_ERROR,
        'error': code,
        'message': message or (str(error) if error is not None else 'Internal error'),
    }


def link_summary(record: LinkRecord, now: datetime) -> dict:
    """Render a link for display"""
    return {
        'shortcode': record.slug,
        'short_url': get_short_url(record.slug),
        'target_url': record.target,
        'limit': str(record.max_clicks),
        'remaining': str(record.remaining_clicks),
        'expires_at': format_timestamp(record.expires_at),
        'expired': record.is_expired(now),
    }


def guarantee_error_response(handler: Callable[..., Response]) -> Callable[..., Response]:
    """Decorator: turn every exception escaping a handler into an error response

    Application and DAO errors keep their own error code and message.
    Anything else is logged with its traceback and reported as 'InternalError',
    so a failing call never takes the caller down with it.
    """

    @functools.wraps(handler)
    def wrapper(*args, **kwargs) -> Response:
        try:
            return handler(*args, **kwargs)
        except (ClickShortenerError, DAOError) as e:
            logger.info('Request rejected.', extra={'handler': handler.__module__, 'error': e.error_code})
            return response_error(e)
        except Exception:
            logger.exception('Unhandled error in handler.', extra={'handler': handler.__module__})
            return response_error(error_code=INTERNAL_ERROR, message='Internal error')

    return wrapper
