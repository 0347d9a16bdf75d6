from golinks.models import Link, ClickStats
from golinks.service import LinkService, open_service
from golinks.utils.canonical import canonicalize
from golinks.utils.logging import initialize_logging


__all__ = [
    'Link',
    'ClickStats',
    'LinkService',
    'open_service',
    'canonicalize',
    'initialize_logging',
]
