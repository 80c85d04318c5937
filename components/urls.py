from django.urls import path

from components import views

app_name = "components"

urlpatterns = [
    path("<path:resource_path>.hero.html", views.hero_image_view, name="hero_image"),
]
