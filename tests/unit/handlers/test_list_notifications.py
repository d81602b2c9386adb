from freezegun import freeze_time

from clickshortener.handlers.list_notifications import handler


def test_no_notifications(registry, owner_id):
    assert handler(registry, {'user': str(owner_id)}) == {'status': 'ok', 'notifications': []}


@freeze_time('2026-10-16 12:00:00')
def test_notifications_are_drained_in_order(registry, owner_id):
    link = registry.create(owner_id, 'https://example.com', max_clicks=1)
    registry.consume(link.slug)
    registry.evict_expired(now=link.expires_at.replace(year=2027))

    response = handler(registry, {'user': str(owner_id)})

    assert response['notifications'] == [
        {'timestamp': '2026-10-16 12:00:00', 'message': f'Click limit for link clck.ru/{link.slug} is exhausted.'},
        {'timestamp': '2026-10-16 12:00:00', 'message': f'Your link clck.ru/{link.slug} has expired and was removed.'},
    ]
    assert handler(registry, {'user': str(owner_id)})['notifications'] == []


def test_notifications_require_user(registry):
    assert handler(registry, {})['error'] == 'MissingArgument'


def test_notifications_reject_invalid_user(registry):
    assert handler(registry, {'user': 'x'})['error'] == 'InvalidIdentity'
