from clickshortener.exceptions import MissingArgumentError
from clickshortener.registry import LinkRegistry
from clickshortener.types import Request, Response
from clickshortener.handlers.responses import guarantee_error_response, response_ok
from clickshortener.utils.helpers import format_timestamp


@guarantee_error_response
def handler(registry: LinkRegistry, request: Request) -> Response:
    """Drain a user's notifications (oldest first)

    Request:
        user (str): owner UUID

    Responses:
        ok:
            notifications (list of {timestamp, message}), empty when none
        error:
            MissingArgument, InvalidIdentity
    """
    raw_user = request.get('user')
    if not raw_user:
        raise MissingArgumentError("Missing 'user' in request")

    notifications = registry.notifications(raw_user)
    return response_ok(
        notifications=[
            {'timestamp': format_timestamp(notification.timestamp), 'message': notification.message}
            for notification in notifications
        ],
    )
