from clickshortener.utils.config import app_env, log_level, link_ttl, load_config, ShortenerConfig
from clickshortener.utils.helpers import (
    utcnow,
    get_short_url,
    extract_slug,
    validate_target_url,
    parse_click_limit,
    parse_owner_id,
    format_timestamp,
)
from clickshortener.utils.shortener import generate_slug
from clickshortener.utils.logging import initialize_logging


__all__ = [
    'generate_slug',
    'app_env',
    'log_level',
    'link_ttl',
    'load_config',
    'ShortenerConfig',
    'utcnow',
    'get_short_url',
    'extract_slug',
    'validate_target_url',
    'parse_click_limit',
    'parse_owner_id',
    'format_timestamp',
    'initialize_logging',
]
