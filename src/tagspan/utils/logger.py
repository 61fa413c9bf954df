"""Logger lookup for tagspan modules.

Every module logs through ``get_logger(__name__)``, so all records live under
the ``tagspan`` logger and can be enabled with one line::

    logging.getLogger("tagspan").setLevel(logging.DEBUG)

Records are DEBUG only and describe work done, never failures (failures are
raised):

- ``tagspan.resolver``: span and node counts for each resolution
- ``tagspan``: document cache hits and misses in ``parse()``, and whether
  ``TaggedText.update()`` re-parsed, re-resolved or kept its spans

The library never configures handlers; applications decide where records go.
"""

from __future__ import annotations

import logging

_ROOT = "tagspan"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, placed under the ``tagspan`` namespace.

    Names already inside the namespace are used as is.

    Example:
        >>> get_logger("tagspan.resolver").name
        'tagspan.resolver'
        >>> get_logger("mymodule").name
        'tagspan.mymodule'
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
