from django.urls import path
from . import views
from .conf import get_context
from .registry import TONE_TYPE

app_name = "tones"

# Public pages live under the slug the content type was registered with.
slug = get_context().registry.get_type(TONE_TYPE).slug

urlpatterns = [
    path("tones/v1/list", views.tone_list, name="list"),

    path(f"{slug}/", views.tone_archive, name="archive"),
    path(f"{slug}/<int:pk>/", views.tone_detail, name="detail"),
]
