"""CSS class list of the hero image banner."""

from .. import config
from ..repository import ValueMap


def resolve_class_list(properties: ValueMap) -> str:
    """
    Build the space-separated CSS class list from component properties.

    Only the exact string "true" enables a modifier; anything else,
    including a missing property, leaves it off.
    """
    classes = [config.HERO_BASE_CLASS]
    if properties.get_as(config.PROP_FULL_WIDTH, str) == "true":
        classes.append(config.HERO_FULL_WIDTH_CLASS)
    if properties.get_as(config.PROP_KEEP_RATIO, str) == "true":
        classes.append(config.HERO_RATIO_CLASS)
    return " ".join(classes)
