"""Tests for the hero image provider."""

import logging
from unittest.mock import MagicMock

import pytest

from components.exceptions import ActivationError
from components.hero_image import HeroImage, HeroImageContext, HeroImageProvider
from components.hero_image.provider import escape_path
from components.repository import (
    RENDER_MODE_EDIT,
    InMemoryResourceResolver,
    RenderMode,
    Resource,
    StaticRequestContext,
)


class TestEscapePath:
    def test_colon_is_escaped(self):
        assert escape_path("/content/we-retail/jcr:content/hero") == (
            "/content/we-retail/jcr%3Acontent/hero"
        )

    def test_special_characters(self):
        assert escape_path("/content/my page/héros") == "/content/my%20page/h%C3%A9ros"
        assert escape_path("/content/a(1)!*'~_.-") == "/content/a(1)!*'~_.-"


class TestGetImage:
    def test_published_appends_timestamp(self, make_context, hero_resource):
        image = HeroImageProvider(make_context(hero_resource)).get_image()
        assert image.src == "/content/we-retail/us/en/jcr%3Acontent/hero_image.img.jpeg/1700000000000.jpeg"
        assert image.src.endswith("/1700000000000.jpeg")

    def test_authoring_has_no_timestamp(self, make_context, hero_resource):
        image = HeroImageProvider(make_context(hero_resource, mode=RENDER_MODE_EDIT)).get_image()
        assert image.src == "/content/we-retail/us/en/jcr%3Acontent/hero_image.img.jpeg"

    def test_no_dates_has_no_timestamp(self, make_context):
        resource = Resource(path="/content/page/hero", properties={"fileReference": "/nowhere"})
        image = HeroImageProvider(make_context(resource)).get_image()
        assert image.src == "/content/page/hero.img.jpeg"

    def test_created_date_fallback(self, make_context):
        resource = Resource(
            path="/content/page/hero",
            properties={"jcr:created": "2023-11-14T22:13:20+00:00"},
        )
        image = HeroImageProvider(make_context(resource)).get_image()
        assert image.src == "/content/page/hero.img.jpeg/1700000000000.jpeg"

    def test_context_path_prefix(self, make_context, hero_resource):
        context = make_context(hero_resource, mode=RENDER_MODE_EDIT, context_path="/shop")
        image = HeroImageProvider(context).get_image()
        assert image.src == "/shop/content/we-retail/us/en/jcr%3Acontent/hero_image.img.jpeg"

    def test_title_prefers_content_title(self, make_context, hero_resource):
        image = HeroImageProvider(make_context(hero_resource)).get_image()
        assert image.title == "Morning Run"

    def test_title_falls_back_to_dc_title(self, make_context, hero_resource, asset_resource):
        del asset_resource.metadata["jcr:title"]
        image = HeroImageProvider(make_context(hero_resource)).get_image()
        assert image.title == "Running Woman"

    def test_unresolved_asset(self, make_context):
        resource = Resource(
            path="/content/page/hero",
            properties={"fileReference": "/content/dam/deleted.jpg", "useFullWidth": "true"},
        )
        provider = HeroImageProvider(make_context(resource))
        image = provider.get_image()
        assert image == HeroImage(src="/content/page/hero.img.jpeg", title=None)
        assert provider.get_class_list() == "we-HeroImage width-full"

    def test_image_is_memoized(self, make_context, hero_resource):
        provider = HeroImageProvider(make_context(hero_resource))
        assert provider.get_image() is provider.get_image()

    def test_logs_resolved_image(self, make_context, hero_resource, caplog):
        caplog.set_level(logging.INFO, logger="components")
        image = HeroImageProvider(make_context(hero_resource)).get_image()
        assert f"Use hero image src '{image.src}', title 'Morning Run'." in caplog.text


class TestActivate:
    def test_activate_computes_both(self, make_context, hero_resource):
        resource = Resource(path=hero_resource.path, properties={**hero_resource.properties, "keepRatio": "true"})
        provider = HeroImageProvider(make_context(resource)).activate()
        assert provider._class_list == "we-HeroImage ratio-16by9"
        assert provider._image is not None
        assert provider.get_image() is provider._image

    def test_resolver_is_consulted_once(self, hero_resource):
        resolver = MagicMock(wraps=InMemoryResourceResolver([hero_resource]))
        context = HeroImageContext(
            resource=hero_resource,
            resource_resolver=resolver,
            request=StaticRequestContext(),
            render_mode=RenderMode(),
        )
        provider = HeroImageProvider(context).activate()
        provider.get_image()
        provider.get_image()
        resolver.get_resource.assert_called_once()

    def test_missing_resource(self, resolver):
        context = HeroImageContext(
            resource=None,
            resource_resolver=resolver,
            request=StaticRequestContext(),
        )
        with pytest.raises(ActivationError):
            HeroImageProvider(context)

    def test_resolver_failure(self, hero_resource):
        resolver = MagicMock()
        resolver.get_resource.side_effect = RuntimeError("repository unavailable")
        context = HeroImageContext(
            resource=hero_resource,
            resource_resolver=resolver,
            request=StaticRequestContext(),
        )
        with pytest.raises(ActivationError) as exc_info:
            HeroImageProvider(context).activate()

        assert exc_info.value.resource_path == hero_resource.path
        assert isinstance(exc_info.value.original_error, RuntimeError)
        assert "repository unavailable" in str(exc_info.value)


class TestHeroImage:
    def test_value_object(self):
        image = HeroImage(src="/a.img.jpeg", title="A")
        assert image.get_src() == "/a.img.jpeg"
        assert image.get_title() == "A"
        assert image.to_dict() == {"src": "/a.img.jpeg", "title": "A"}
        assert str(image) == "/a.img.jpeg"

    def test_immutable(self):
        image = HeroImage(src="/a.img.jpeg")
        with pytest.raises(AttributeError):
            image.src = "/b.img.jpeg"
