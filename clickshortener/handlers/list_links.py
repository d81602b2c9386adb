from clickshortener.exceptions import MissingArgumentError
from clickshortener.registry import LinkRegistry
from clickshortener.types import Request, Response
from clickshortener.handlers.responses import guarantee_error_response, link_summary, response_ok


@guarantee_error_response
def handler(registry: LinkRegistry, request: Request) -> Response:
    """List a user's links, oldest first

    Links past their expiry that the sweeper has not evicted yet are listed
    with `expired: True`.

    Request:
        user (str): owner UUID

    Responses:
        ok:
            user, links (list of summaries); plus message 'no links' when empty
        error:
            MissingArgument, InvalidIdentity
    """
    raw_user = request.get('user')
    if not raw_user:
        raise MissingArgumentError("Missing 'user' in request")

    links = registry.list_by_owner(raw_user)
    now = registry.now()
    if not links:
        return response_ok(user=str(raw_user), links=[], message='no links')
    return response_ok(user=str(raw_user), links=[link_summary(link, now) for link in links])
