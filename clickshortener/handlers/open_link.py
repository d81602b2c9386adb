import logging

from clickshortener.exceptions import MissingArgumentError
from clickshortener.registry import LinkRegistry
from clickshortener.types import Opener, Request, Response
from clickshortener.handlers.responses import guarantee_error_response, response_redirect
from clickshortener.utils.helpers import extract_slug, get_short_url


logger = logging.getLogger(__name__)


@guarantee_error_response
def handler(registry: LinkRegistry, request: Request, opener: Opener | None = None) -> Response:
    """Follow a short link

    This handler follows this procedure to redirect:
    - Step 1: Extract the slug from the short URL or bare slug
    - Step 2: Consume one click (expiry and limit are checked atomically)
    - Step 3: Hand the target URL to the external viewer, if one is given
    - Step 4: Respond with the redirect location

    The click is counted as soon as step 2 succeeds. A viewer failure in
    step 3 is logged and reported in `viewer_error`; it does not refund it.

    Request:
        link (str): `clck.ru/<slug>`, `https://<host>/<slug>` or a bare slug

    Responses:
        redirect:
            location, shortcode, remaining
        error:
            MissingArgument, NotFound, Expired, LimitExhausted

    Example:
        >>> handler(registry, {'link': 'clck.ru/Ab9ZxQ1k'}, opener=webbrowser.open)
        {'status': 'redirect', 'location': 'https://example.com', ...}
    """
    # 1- Extract the slug
    raw = request.get('link')
    if not raw:
        raise MissingArgumentError("Missing 'link' in request")
    slug = extract_slug(raw)
    logger.debug('Client requested short URL %s.', get_short_url(slug))

    # 2- Consume one click
    link = registry.consume(slug)

    # 3- Open in the external viewer
    extra = {}
    if opener is not None:
        try:
            opener(link.target)
        except Exception as e:
            logger.warning('External viewer failed to open target URL.', extra={'slug': slug, 'reason': str(e)})
            extra['viewer_error'] = str(e)

    # 4- Redirect to target URL
    logger.info('Redirecting client to target URL.', extra={'slug': slug})
    return response_redirect(
        location=link.target,
        shortcode=link.slug,
        remaining=str(link.remaining_clicks),
        **extra,
    )
