"""Utility functions for application configuration management.

Configuration comes from environment variables only. There is a single
tunable that changes behavior, the default link TTL; the rest select the
environment name and log verbosity.

Environment variables:
    APP_ENV             – Application environment, `'local'` by default.
    LOG_LEVEL           – Root log level, `'INFO'` by default.
    LINK_TTL_SECONDS    – Default link TTL in seconds, 86400 (1 day) by default.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    log_level() -> str
        Return the configured log level name.

    link_ttl() -> timedelta
        Return the default link TTL, reading `LINK_TTL_SECONDS`.

    load_config() -> ShortenerConfig
        Collect all settings into a single immutable object.

Example:
    >>> os.environ['LINK_TTL_SECONDS'] = '3600'
    >>> load_config().ttl
    datetime.timedelta(seconds=3600)
"""

import os
import logging
from dataclasses import dataclass
from datetime import timedelta

from clickshortener.constants import ENV, TTL
from clickshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortenerConfig:
    app_env: str
    log_level: str
    ttl: timedelta


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def log_level() -> str:
    return os.environ.get(ENV.App.LOG_LEVEL, 'INFO').upper()


def link_ttl() -> timedelta:
    """Return the default link TTL by reading 'LINK_TTL_SECONDS'

    Returns:
        timedelta:
            Configured TTL, one day when the variable is unset or empty.

    Raises:
        BadConfigurationError:
            If the value is not a positive integer number of seconds.

    Example:
        >>> os.environ['LINK_TTL_SECONDS'] = '60'
        >>> link_ttl()
        datetime.timedelta(seconds=60)
    """
    raw = os.environ.get(ENV.App.LINK_TTL_SECONDS, '').strip()
    if not raw:
        return timedelta(seconds=TTL.ONE_DAY)

    try:
        seconds = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"{ENV.App.LINK_TTL_SECONDS} must be an integer (given value: '{raw}').") from e

    if seconds <= 0:
        raise BadConfigurationError(f'{ENV.App.LINK_TTL_SECONDS} must be positive (given value: {seconds}).')

    logger.debug('Loaded link TTL from environment.', extra={'ttlSeconds': seconds})
    return timedelta(seconds=seconds)


def load_config() -> ShortenerConfig:
    return ShortenerConfig(app_env=app_env(), log_level=log_level(), ttl=link_ttl())
