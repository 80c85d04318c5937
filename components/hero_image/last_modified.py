"""Last modification timestamp used for cache busting."""

import logging
from datetime import datetime

from .. import config
from ..repository import ValueMap, to_epoch_millis

logger = logging.getLogger(__name__)

# Date properties, most relevant first
DATE_KEYS = (
    config.PROP_LAST_MODIFIED,
    config.PROP_CREATED,
)


def resolve_last_modified(properties: ValueMap) -> int:
    """
    Return the last modification time of a resource in epoch milliseconds.

    Uses the last-modified property if set, otherwise the created property.
    A property holding something other than a date is skipped.

    Returns:
        Epoch milliseconds, or 0 if neither property is present
    """
    for key in DATE_KEYS:
        if key not in properties:
            continue

        value = properties.get_as(key, datetime)
        if value is None:
            logger.warning(f"Property '{key}' is not a date: {properties.get(key)!r}")
            continue
        return to_epoch_millis(value)

    return 0
