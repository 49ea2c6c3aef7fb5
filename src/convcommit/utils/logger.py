"""Logger lookup for convcommit modules.

Every logger lives under the ``convcommit`` namespace, so an application
can tune the whole package through ``logging.getLogger("convcommit")``.
No handlers are attached here; output appears only once the host
application configures logging.
"""

import logging

PACKAGE_LOGGER = "convcommit"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the convcommit namespace.

    Example:
        >>> get_logger("convcommit.parser").name
        'convcommit.parser'
        >>> get_logger("hooks").name
        'convcommit.hooks'
    """
    if name.partition(".")[0] != PACKAGE_LOGGER:
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
