from golinks.models.link_model import Link, ClickStats


__all__ = ['Link', 'ClickStats']
