from dataclasses import dataclass
from datetime import datetime
from typing import Optional


# Short name (display form or canonical key) -> click count
ClickStats = dict[str, int]


@dataclass(frozen=True)
class Link:
    """Represent a registered go link.

    Attributes:
        short (str):
            The short name exactly as registered (case and punctuation preserved).
        long (str):
            Destination URL the short name redirects to.
        owner (str):
            Opaque identity of the link owner. Compared byte-for-byte.
        created (Optional[datetime]):
            When the link was first created, if the caller tracks it.
        last_edit (Optional[datetime]):
            When the link was last saved, if the caller tracks it.

    Example:
        >>> link = Link(short='Foo.Bar', long='https://example.com/foo', owner='foo@bar.com')
        >>> link.short
        'Foo.Bar'
        >>> link.owner
        'foo@bar.com'
    """

    short: str
    long: str = ''
    owner: str = ''
    created: Optional[datetime] = None
    last_edit: Optional[datetime] = None
