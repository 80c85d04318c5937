from django import template

from components.hero_image import HeroImageProvider, provider_for_request

register = template.Library()


@register.simple_tag(takes_context=True)
def hero_image_provider(context, resource_path: str) -> HeroImageProvider:
    """
    Activate a hero image provider for a component resource.

    Requires `request` and `resource_resolver` in the template context.

    Usage:
        {% load hero_image_tags %}
        {% hero_image_provider "/content/home/jcr:content/hero" as hero %}
        {% hero_image hero %}
    """
    return provider_for_request(context["request"], resource_path, context["resource_resolver"])


@register.inclusion_tag("components/hero_image.html")
def hero_image(provider: HeroImageProvider) -> dict:
    """Render the hero image banner of an activated provider."""
    return {
        "class_list": provider.get_class_list(),
        "image": provider.get_image(),
    }
