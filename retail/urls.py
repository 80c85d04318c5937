"""Project-level URL configuration."""

from typing import Any, List

from django.urls import include, path

urlpatterns: List[Any] = [
    path("", include("components.urls")),
]
