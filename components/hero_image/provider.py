"""
Hero image provider.

View model behind the hero image banner. Derives the CSS class list and the
image URL/title from the component's properties and its referenced asset.
"""

import logging
from urllib.parse import quote

from .. import config
from ..exceptions import ActivationError
from ..repository import DjangoRequestContext, RenderMode
from .class_list import resolve_class_list
from .context import HeroImage, HeroImageContext
from .last_modified import resolve_last_modified
from .metadata import extract_meta_values, resolve_asset, resolve_title

logger = logging.getLogger(__name__)

# Characters left unescaped in resource paths besides letters, digits and "_.-~"
PATH_SAFE_CHARS = "/!*'()"


def escape_path(path: str) -> str:
    """Percent-encode a repository path for use in a URL, keeping slashes."""
    return quote(path, safe=PATH_SAFE_CHARS)


class HeroImageProvider:
    """
    Data provider for the hero image component.

    Both results are computed at most once per provider and then reused;
    a provider serves a single page render.

    Usage:
        provider = HeroImageProvider(context).activate()
        provider.get_class_list()  # "we-HeroImage width-full"
        provider.get_image().src   # "/content/page/jcr%3Acontent/hero.img.jpeg/1700000000000.jpeg"
    """

    def __init__(self, context: HeroImageContext):
        if context.resource is None:
            raise ActivationError("Hero image component has no backing resource")

        self.context = context
        self._class_list: str | None = None
        self._image: HeroImage | None = None

    def activate(self) -> "HeroImageProvider":
        """
        Compute class list and image up front.

        Raises:
            ActivationError: If a host service fails while resolving the image
        """
        self.get_class_list()
        try:
            self.get_image()
        except ActivationError:
            raise
        except Exception as e:
            raise ActivationError(
                f"Failed to resolve hero image: {e}",
                resource_path=self.context.resource.path,
                original_error=e,
            ) from e
        return self

    def get_class_list(self) -> str:
        """Return the banner's CSS class names."""
        if self._class_list is None:
            self._class_list = resolve_class_list(self.context.properties)
        return self._class_list

    def get_image(self) -> HeroImage:
        """Return the hero image, resolving it on first access."""
        if self._image is None:
            self._image = self._resolve_image()
        return self._image

    def _resolve_image(self) -> HeroImage:
        context = self.context
        properties = context.properties

        asset = resolve_asset(properties, context.resource_resolver)
        meta_vals = extract_meta_values(asset)
        title = resolve_title(meta_vals)

        # The component resource is rendered by the image servlet, not the asset itself
        src = (
            f"{escape_path(context.resource.path)}"
            f".{config.HERO_IMAGE_SELECTOR}.{config.HERO_IMAGE_EXTENSION}"
        )

        last_modified = resolve_last_modified(properties)
        if not context.render_mode.is_disabled() and last_modified > 0:
            src += f"/{last_modified}.{config.HERO_IMAGE_EXTENSION}"
        else:
            logger.debug(f"No cache busting for '{context.resource.path}'")

        src = context.request.get_context_path() + src

        image = HeroImage(src=src, title=title)
        logger.info(f"Use hero image src '{image.src}', title '{image.title}'.")
        return image


def provider_for_request(request, resource_path: str, resource_resolver) -> HeroImageProvider:
    """
    Build and activate a hero image provider for a Django request.

    Args:
        request: The current HttpRequest
        resource_path: Path of the hero image component resource
        resource_resolver: Resolver for component and asset paths

    Raises:
        ActivationError: If the component resource does not exist
    """
    resource = resource_resolver.get_resource(resource_path)
    if resource is None:
        raise ActivationError("Component resource not found", resource_path=resource_path)

    context = HeroImageContext(
        resource=resource,
        resource_resolver=resource_resolver,
        request=DjangoRequestContext(request),
        render_mode=RenderMode.from_request(request),
    )
    return HeroImageProvider(context).activate()
