"""
Hero image component.

Derives the display attributes of a hero image banner (image URL with
cache-busting timestamp, title, CSS classes) from the component's properties
and the asset it references.
"""

from .context import HeroImage, HeroImageContext
from .provider import HeroImageProvider, provider_for_request

__all__ = ["HeroImage", "HeroImageContext", "HeroImageProvider", "provider_for_request"]
