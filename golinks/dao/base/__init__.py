from golinks.dao.base.link_base_dao import LinkBaseDAO
from golinks.dao.base.stats_base_dao import StatsBaseDAO


__all__ = ['LinkBaseDAO', 'StatsBaseDAO']
