from django.db import DEFAULT_DB_ALIAS, models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class ToneQuerySet(models.QuerySet):
    def published(self):
        return self.filter(status=Tone.PUBLISH)


class Tone(models.Model):
    PUBLISH = "publish"
    DRAFT = "draft"
    STATUS_CHOICES = [
        (PUBLISH, _("Published")),
        (DRAFT, _("Draft")),
    ]

    title = models.CharField(_("title"), max_length=200)
    status = models.CharField(_("status"), max_length=20, choices=STATUS_CHOICES, default=PUBLISH)
    date = models.DateTimeField(_("date"), default=timezone.now)
    modified = models.DateTimeField(_("modified"), auto_now=True)

    objects = ToneQuerySet.as_manager()

    class Meta:
        verbose_name = _("Tone")
        verbose_name_plural = _("Tones")
        ordering = ["-date", "-id"]

    def __str__(self):
        return self.title

    def get_meta(self, key: str, default: str = "") -> str:
        # Uses the prefetch cache when the queryset asked for it.
        for row in self.meta.all():
            if row.meta_key == key:
                return row.meta_value
        return default

    def set_meta(self, key: str, value) -> None:
        ToneMeta.objects.update_or_create(
            tone=self, meta_key=key, defaults={"meta_value": "" if value is None else str(value)}
        )
        # Drop a stale prefetch so later reads see the write.
        getattr(self, "_prefetched_objects_cache", {}).pop("meta", None)


class ToneMeta(models.Model):
    tone = models.ForeignKey(Tone, on_delete=models.CASCADE, related_name="meta")
    meta_key = models.CharField(max_length=255)
    meta_value = models.TextField(blank=True, default="")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["tone", "meta_key"], name="tones_unique_meta_key"),
        ]

    def __str__(self):
        return f"{self.tone_id}:{self.meta_key}"


class Option(models.Model):
    name = models.CharField(max_length=191, unique=True)
    value = models.TextField(blank=True, default="")

    def __str__(self):
        return self.name

    @classmethod
    def get_value(cls, name: str, default=None, using=DEFAULT_DB_ALIAS):
        row = cls.objects.using(using).filter(name=name).first()
        return default if row is None else row.value

    @classmethod
    def set_value(cls, name: str, value, using=DEFAULT_DB_ALIAS) -> None:
        cls.objects.using(using).update_or_create(name=name, defaults={"value": str(value)})
