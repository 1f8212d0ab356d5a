from django.contrib import admin

from .conf import get_context
from .forms import ToneAdminForm, save_tone_meta
from .models import Tone
from .registry import TONE_TYPE


@admin.register(Tone)
class ToneAdmin(admin.ModelAdmin):
    form = ToneAdminForm
    list_display = ("title", "status", "date")
    list_filter = ("status",)
    search_fields = ("title",)

    def get_fieldsets(self, request, obj=None):
        fieldsets = [(None, {"fields": ["title", "status"]})]
        # One box per registered meta field.
        for field in get_context().registry.fields_for(TONE_TYPE):
            fieldsets.append((field.label, {"fields": [field.key]}))
        return fieldsets

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        keys = get_context().registry.field_keys(TONE_TYPE)
        save_tone_meta(obj, request.POST, keys)
