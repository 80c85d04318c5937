"""Pytest fixtures for component tests."""

from datetime import datetime, timezone

import pytest

from components.hero_image import HeroImageContext
from components.repository import (
    InMemoryResourceResolver,
    RenderMode,
    RENDER_MODE_PUBLISH,
    Resource,
    StaticRequestContext,
)

HERO_PATH = "/content/we-retail/us/en/jcr:content/hero_image"
ASSET_PATH = "/content/dam/we-retail/en/activities/running/running-woman.jpg"

# 2023-11-14T22:13:20Z
LAST_MODIFIED = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


@pytest.fixture
def asset_resource():
    return Resource(
        path=ASSET_PATH,
        metadata={
            "dam:Bitsperpixel": 24,
            "dam:MIMEtype": "image/jpeg",
            "dc:description": "Woman running on a beach",
            "dc:title": "Running Woman",
            "jcr:title": "Morning Run",
            "smp:CreatorTool": "Adobe Photoshop CC",
        },
    )


@pytest.fixture
def hero_resource():
    return Resource(
        path=HERO_PATH,
        properties={
            "fileReference": ASSET_PATH,
            "jcr:lastModified": LAST_MODIFIED,
        },
    )


@pytest.fixture
def resolver(hero_resource, asset_resource):
    return InMemoryResourceResolver([hero_resource, asset_resource])


@pytest.fixture
def make_context(resolver):
    def _make(resource, mode=RENDER_MODE_PUBLISH, context_path=""):
        return HeroImageContext(
            resource=resource,
            resource_resolver=resolver,
            request=StaticRequestContext(context_path),
            render_mode=RenderMode(mode),
        )

    return _make

