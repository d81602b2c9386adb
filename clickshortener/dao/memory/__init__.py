from clickshortener.dao.memory.link_memory_dao import LinkMemoryDAO
from clickshortener.dao.memory.mailbox_memory_dao import MailboxMemoryDAO


__all__ = [
    'LinkMemoryDAO',
    'MailboxMemoryDAO',
]
