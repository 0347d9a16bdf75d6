"""Short name canonicalization

Every component that compares short names (link uniqueness, stats merging,
display form resolution) goes through `canonicalize()`.

Rules:
    1. Case-fold the name with `str.casefold()` (Unicode default case folding,
       independent of the process locale).
    2. Drop every character that is not a letter or digit (`str.isalnum()`),
       so hyphens, dots, underscores, slashes and whitespace all disappear.

Example:
    >>> canonicalize('B-c')
    'bc'
    >>> canonicalize('Foo.Bar')
    'foobar'
    >>> canonicalize('')
    ''
"""


def canonicalize(name: str) -> str:
    """Return the canonical comparison key for a short name

    Args:
        name (str):
            Short name in any display form.

    Returns:
        str: canonical key, possibly empty.
    """
    return ''.join(ch for ch in name.casefold() if ch.isalnum())
