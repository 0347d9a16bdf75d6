"""Abstract base class for Link data access objects (DAOs).

This class establishes a consistent contract for all Link DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, PostgreSQL).

Responsibilities:
    - Store at most one Link per canonical short name.
    - Provide lookups by (any spelling of) a short name, by owner, and in bulk.
    - Standardize error handling across data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from golinks.models import Link
        >>> from golinks.dao.redis import LinkRedisDAO

        >>> dao = LinkRedisDAO(...)
        >>> dao.save(Link(short='Foo.Bar', long='https://example.com'))

        >>> dao.get('foobar').short
        'Foo.Bar'
"""

from abc import ABC, abstractmethod

from golinks.models import Link


class LinkBaseDAO(ABC):
    """Interface for Link data access objects (DAOs).

    Methods:
        save(link: Link, **kwargs) -> LinkBaseDAO:
            Insert or fully replace the Link registered under canonicalize(link.short).

        get(short: str, **kwargs) -> Link:
            Retrieve the Link registered under canonicalize(short).
            Raises LinkNotFoundError if absent.

        all(**kwargs) -> list[Link]:
            Retrieve every stored Link, in no particular order.

        delete(short: str, **kwargs) -> LinkBaseDAO:
            Remove the Link registered under canonicalize(short), if any.

        by_owner(owner: str, **kwargs) -> list[Link]:
            Retrieve every Link whose owner equals `owner` exactly.

        display_forms(keys: Iterable[str], **kwargs) -> dict[str, str]:
            Map canonical keys to the short name registered under them.

    All methods raise DataStoreError on connection or read/write failure.
    """

    @abstractmethod
    def save(self, link: Link, **kwargs) -> 'LinkBaseDAO':
        """Insert or replace a Link in the data store.

        Args:
            link (Link):
                The Link to store. Its short name's canonical key is the slot.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, short: str, **kwargs) -> Link:
        """Retrieve a Link by any spelling of its short name.

        Raises:
            LinkNotFoundError:
                If no Link is registered under the canonical key.
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def all(self, **kwargs) -> list[Link]:
        pass

    @abstractmethod
    def delete(self, short: str, **kwargs) -> 'LinkBaseDAO':
        """Remove a Link. Deleting an absent Link is not an error."""
        pass

    @abstractmethod
    def by_owner(self, owner: str, **kwargs) -> list[Link]:
        """Retrieve Links by owner (exact, case-sensitive, untrimmed comparison)."""
        pass

    @abstractmethod
    def display_forms(self, keys, **kwargs) -> dict[str, str]:
        pass
