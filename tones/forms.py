from django import forms
from django.utils.translation import gettext_lazy as _

from .models import Tone
from .registry import FILE_KEY, FREQ_KEY


def save_tone_meta(tone, data, keys) -> list:
    """
    Copy submitted meta values onto ``tone``.

    Only keys present in ``data`` are written, as submitted; absent keys keep
    their stored value. Returns the keys that were written.
    """
    written = []
    for key in keys:
        if key in data:
            tone.set_meta(key, data[key])
            written.append(key)
    return written


class ToneAdminForm(forms.ModelForm):
    # Text on the server so the posted value is stored as submitted.
    tone_freq = forms.CharField(
        label=_("Tone Freq"),
        required=False,
        widget=forms.NumberInput(attrs={"step": 1}),
    )
    tone_file = forms.CharField(
        label=_("Tone File"),
        required=False,
        widget=forms.TextInput(),
    )

    class Meta:
        model = Tone
        fields = ["title", "status"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk:
            for key in (FREQ_KEY, FILE_KEY):
                self.initial.setdefault(key, self.instance.get_meta(key))
