import logging
from typing import Dict, List, Sequence

from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, render
from django.views.decorators.http import require_safe

from .conf import get_context
from .models import Tone
from .registry import FILE_KEY, FREQ_KEY, TONE_TYPE
from .utils import tone_file_url

logger = logging.getLogger(__name__)

# Newest first, id breaks ties between records published at the same moment.
DEFAULT_ORDERING = ("-date", "-id")


def _base_url(request) -> str:
    # build_absolute_uri leaves absolute URLs untouched.
    return request.build_absolute_uri(get_context().settings.url)


def tone_to_dict(tone: Tone, base_url: str) -> Dict:
    file_name = tone.get_meta(FILE_KEY)
    return {
        "id": tone.pk,
        "title": tone.title,
        "frequency": tone.get_meta(FREQ_KEY),
        "file": file_name,
        "full_url": tone_file_url(base_url, file_name),
    }


def list_tones(base_url: str, ordering: Sequence[str] = DEFAULT_ORDERING) -> List[Dict]:
    """All published tones, mapped for the listing endpoint, in ``ordering``."""
    qs = Tone.objects.published().order_by(*ordering).prefetch_related("meta")
    return [tone_to_dict(tone, base_url) for tone in qs]


@require_safe
def tone_list(request):
    tones = list_tones(_base_url(request))
    logger.debug("Listing %d tones", len(tones))
    return JsonResponse(tones, safe=False)


def tone_archive(request):
    post_type = get_context().registry.get_type(TONE_TYPE)
    if not post_type.has_archive:
        raise Http404("No archive for this content type")
    return render(request, "tones/tone_archive.html", {
        "post_type": post_type,
        "tones": list_tones(_base_url(request)),
    })


def tone_detail(request, pk):
    tone = get_object_or_404(Tone.objects.published().prefetch_related("meta"), pk=pk)
    return render(request, "tones/tone_detail.html", {
        "post_type": get_context().registry.get_type(TONE_TYPE),
        "tone": tone_to_dict(tone, _base_url(request)),
    })
