from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Default short link TTL duration (1 day in seconds)
    ONE_DAY = 86_400  # 60 * 60 * 24


class Sweep:
    """Expiration sweeper schedule in seconds."""

    INITIAL_DELAY = 10
    INTERVAL = 30


class Slug:
    """Short link identifier parameters."""

    LENGTH = 8
    # Collisions are retried; 62**8 makes reaching this bound practically impossible
    MAX_ATTEMPTS = 32


# Display prefix of every short link, e.g. clck.ru/Ab9ZxQ1k
SHORT_BASE = 'clck.ru/'

# Display values
UNLIMITED_DISPLAY = '∞'
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        LOG_LEVEL = 'LOG_LEVEL'
        LINK_TTL_SECONDS = 'LINK_TTL_SECONDS'


# Response statuses
STATUS_OK = 'ok'
STATUS_REDIRECT = 'redirect'
STATUS_ERROR = 'error'

# Error codes
INTERNAL_ERROR = 'InternalError'
