"""
Hero image context.

Dataclasses for passing host services into the hero image provider and for
the image it produces.
"""

from dataclasses import dataclass, field

from ..repository import RenderMode, RequestContext, Resource, ResourceResolver, ValueMap


@dataclass
class HeroImageContext:
    """Dependencies of one hero image activation."""

    resource: Resource  # The component's own backing resource
    resource_resolver: ResourceResolver
    request: RequestContext
    render_mode: RenderMode = field(default_factory=RenderMode)

    @property
    def properties(self) -> ValueMap:
        return self.resource.properties


@dataclass(frozen=True)
class HeroImage:
    """Display attributes of the hero image."""

    src: str  # Image URL, always set
    title: str | None = None  # Title/alt text, if the asset has one

    def get_src(self) -> str:
        return self.src

    def get_title(self) -> str | None:
        return self.title

    def to_dict(self) -> dict[str, str | None]:
        return {"src": self.src, "title": self.title}

    def __str__(self):
        return self.src
