from clickshortener.exceptions import MissingArgumentError
from clickshortener.registry import LinkRegistry
from clickshortener.types import Request, Response
from clickshortener.handlers.responses import guarantee_error_response, response_ok
from clickshortener.utils.helpers import extract_slug, get_short_url


@guarantee_error_response
def handler(registry: LinkRegistry, request: Request) -> Response:
    """Delete a link on behalf of its owner

    Request:
        link (str): short URL or bare slug
        user (str): owner UUID

    Responses:
        ok:
            deleted (short URL)
        error:
            MissingArgument, InvalidIdentity, NotFound, Forbidden
    """
    raw = request.get('link')
    raw_user = request.get('user')
    if not raw:
        raise MissingArgumentError("Missing 'link' in request")
    if not raw_user:
        raise MissingArgumentError("Missing 'user' in request")

    link = registry.delete(extract_slug(raw), requester=raw_user)
    return response_ok(message=f'Deleted {get_short_url(link.slug)}', deleted=get_short_url(link.slug))
