from django.db import models
from django.db.models import JSONField
from django.utils.text import slugify


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    modified_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-created_at', '-modified_at')
        abstract = True


class SlugModel(models.Model):
    slug = models.SlugField(unique=True, max_length=50, blank=True)

    class Meta:
        abstract = True

    def _get_slug_text(self):
        assert any([hasattr(self, 'name'), hasattr(self, 'title')])
        if hasattr(self, 'name'):
            return self.name
        return self.title

    def _unique_slug(self, text):
        base = slugify(text)[:45].strip('-') or self.__class__.__name__.lower()
        slug, suffix = base, 1
        queryset = self.__class__.objects.exclude(pk=self.pk)
        while queryset.filter(slug=slug).exists():
            suffix += 1
            slug = f'{base}-{suffix}'
        return slug

    def save(self, *args, **kwargs):
        if self.slug:
            self.slug = slugify(self.slug)
        else:
            self.slug = self._unique_slug(self._get_slug_text())
        return super().save(*args, **kwargs)


class MetadataModel(models.Model):
    """
    Free-form key/value data attached to a record. Keys are always stored as
    strings.
    """
    metadata = JSONField(default=dict, blank=True)

    class Meta:
        abstract = True

    def set_metadata(self, key, value):
        self.metadata = {**(self.metadata or {}), str(key): value}
        self.save(update_fields=['metadata', 'modified_at'])

    def get_metadata(self, key):
        return (self.metadata or {}).get(str(key))
