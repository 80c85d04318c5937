"""Preview views for page components."""

import logging

from django.http import Http404
from django.shortcuts import render
from django.views.decorators.http import require_http_methods

from components.exceptions import ActivationError
from components.hero_image import provider_for_request
from components.repository import get_resource_resolver

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
def hero_image_view(request, resource_path):
    """
    Render the hero image banner of a component resource.

    URL Parameters:
        resource_path: Repository path of the component, without leading slash

    Query Parameters:
        mode (optional): Render mode, "publish" (default) or "edit"

    Returns:
        HttpResponse: HTML fragment with the banner
        404: If the component resource does not exist
    """
    try:
        provider = provider_for_request(request, f"/{resource_path}", get_resource_resolver())
    except ActivationError as e:
        logger.warning(f"Hero image preview failed: {e}")
        raise Http404(str(e)) from e

    return render(
        request,
        "components/hero_image.html",
        {"class_list": provider.get_class_list(), "image": provider.get_image()},
    )
