import logging
from uuid import uuid4

from clickshortener.exceptions import MissingArgumentError, UnknownOptionError
from clickshortener.registry import LinkRegistry
from clickshortener.types import Request, Response
from clickshortener.handlers.responses import guarantee_error_response, response_ok
from clickshortener.utils.helpers import format_timestamp, get_short_url, parse_click_limit, parse_owner_id


logger = logging.getLogger(__name__)

ALLOWED_OPTIONS = frozenset({'url', 'limit', 'user'})


@guarantee_error_response
def handler(registry: LinkRegistry, request: Request) -> Response:
    """Shorten a URL

    This handler follows this procedure to shorten URLs:
    - Step 1: Reject unknown options
    - Step 2: Extract and validate target URL, click limit and user
    - Step 3: Generate a fresh user identity when none was given
    - Step 4: Store the link (via the registry)
    - Step 5: Respond with the link's display fields

    Request:
        url (str): absolute URL to shorten (required)
        limit (str | int): click limit >= 1 (optional, unlimited when absent)
        user (str): owner UUID (optional, generated when absent)

    Responses:
        ok:
            shortcode, short_url, target_url, limit, remaining, expires_at,
            user, new_user
        error:
            UnknownOption, MissingArgument, InvalidURL, InvalidLimit, InvalidIdentity

    Example:
        >>> response = handler(registry, {'url': 'https://example.com', 'limit': '3'})
        >>> response['short_url']
        'clck.ru/Ab9ZxQ1k'
        >>> response['remaining']
        '3'
    """
    # 1- Reject unknown options
    unknown = sorted(set(request) - ALLOWED_OPTIONS)
    if unknown:
        raise UnknownOptionError(f'Unknown option: {unknown[0]}')

    # 2- Extract and validate request fields
    target_url = request.get('url')
    if not target_url:
        raise MissingArgumentError("Missing 'url' in request")
    max_clicks = parse_click_limit(request.get('limit'))

    # 3- Resolve owner identity
    raw_user = request.get('user')
    new_user = raw_user is None
    owner_id = uuid4() if new_user else parse_owner_id(raw_user)
    if new_user:
        logger.info('Generated new user identity.', extra={'ownerId': str(owner_id)})

    # 4- Store the link
    link = registry.create(owner_id, target_url, max_clicks=max_clicks)

    # 5- Respond with the link's display fields
    return response_ok(
        message=f'Successfully shortened {target_url} to {get_short_url(link.slug)}',
        shortcode=link.slug,
        short_url=get_short_url(link.slug),
        target_url=link.target,
        limit=str(link.max_clicks),
        remaining=str(link.remaining_clicks),
        expires_at=format_timestamp(link.expires_at),
        user=str(owner_id),
        new_user=new_user,
    )
