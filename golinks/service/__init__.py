from golinks.service.link_service import LinkService, open_service


__all__ = ['LinkService', 'open_service']
