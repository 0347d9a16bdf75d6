"""Abstract base class for click stats data access objects (DAOs).

Click counts are stored per canonical short name and merged additively:
observations reported under different spellings of the same short name
accumulate into a single counter.

Example:
    >>> from golinks.dao.redis import StatsRedisDAO
    >>> dao = StatsRedisDAO(links=link_dao, ...)
    >>> dao.save({'b-c': 1}).save({'bc': 2})
    >>> dao.load()
    {'B-c': 3}
"""

from abc import ABC, abstractmethod

from golinks.models import ClickStats


class StatsBaseDAO(ABC):
    """Interface for click stats data access objects (DAOs).

    Methods:
        save(observations: ClickStats, **kwargs) -> StatsBaseDAO:
            Atomically add a batch of click counts to their canonical counters.

        load(**kwargs) -> ClickStats:
            Return every counter keyed by its display form.

        delete(short: str, **kwargs) -> StatsBaseDAO:
            Remove the counter for canonicalize(short), if any.

        incr(short: str, count: int = 1, **kwargs) -> int:
            Add to a single counter and return its new value.

        get(short: str, **kwargs) -> int:
            Return a single counter, 0 if nothing was recorded.

    All methods raise DataStoreError on connection or read/write failure.
    """

    @abstractmethod
    def save(self, observations: ClickStats, **kwargs) -> 'StatsBaseDAO':
        """Merge a batch of click observations into the stored counters.

        The whole batch is applied atomically; a counter is never overwritten,
        only incremented.

        Args:
            observations (ClickStats):
                Short name (any display form) -> non-negative increment.

        Returns:
            StatsBaseDAO: self (for method chaining)

        Raises:
            ValueError:
                If an increment is negative or a counter would overflow.
                Nothing is written.
            DataStoreError:
                If there is an error in the data store. Nothing is written.
        """
        pass

    @abstractmethod
    def load(self, **kwargs) -> ClickStats:
        pass

    @abstractmethod
    def delete(self, short: str, **kwargs) -> 'StatsBaseDAO':
        pass

    @abstractmethod
    def incr(self, short: str, count: int = 1, **kwargs) -> int:
        pass

    @abstractmethod
    def get(self, short: str, **kwargs) -> int:
        pass
