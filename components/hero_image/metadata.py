"""
Hero image asset metadata.

Looks up the referenced asset and pulls the whitelisted metadata values and
the image title from it.
"""

import logging

from .. import config
from ..repository import Asset, ResourceResolver, ValueMap

logger = logging.getLogger(__name__)


def resolve_asset(properties: ValueMap, resource_resolver: ResourceResolver) -> Asset | None:
    """
    Resolve the asset referenced by the component's fileReference property.

    Returns:
        The referenced Asset, or None if no reference is configured, the
        path does not exist or does not point to an asset
    """
    file_path = (properties.get_as(config.PROP_FILE_REFERENCE, str) or "").strip()
    if not file_path:
        logger.debug("No file reference configured")
        return None

    resource = resource_resolver.get_resource(file_path)
    if resource is None:
        logger.info(f"File reference '{file_path}' not found")
        return None

    return resource_resolver.resolve_to_asset(resource)


def extract_meta_values(asset: Asset | None) -> dict[str, str]:
    """
    Collect the whitelisted metadata values of an asset.

    Args:
        asset: The referenced asset, or None if unresolved

    Returns:
        Metadata values sorted by key; missing keys are left out
    """
    asset_path = asset.path if asset is not None else None
    asset_name = asset.name if asset is not None else None

    meta_vals = {}
    for key in config.META_KEYS:
        val = asset.get_metadata_value(key) if asset is not None else None
        if val is None:
            logger.info(f"Meta '{key}' in '{asset_path}' not found.")
            continue
        meta_vals[key] = val

    meta_vals = dict(sorted(meta_vals.items()))
    logger.info(f"Got hero image '{asset_name}', path '{asset_path}', meta vals {meta_vals} .")
    return meta_vals


def resolve_title(meta_vals: dict[str, str]) -> str | None:
    """Return the image title, preferring the content title over dc:title."""
    for key in config.TITLE_KEYS:
        title = meta_vals.get(key)
        if title is None:
            continue

        logger.debug(f"Found title '{title}' from '{key}'.")
        return title

    return None
