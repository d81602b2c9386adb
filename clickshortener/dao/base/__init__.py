from clickshortener.dao.base.link_base_dao import LinkBaseDAO
from clickshortener.dao.base.mailbox_base_dao import MailboxBaseDAO


__all__ = [
    'LinkBaseDAO',
    'MailboxBaseDAO',
]
