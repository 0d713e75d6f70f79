from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models

from hiretrack.common.models import TimeStampedModel, SlugModel

validate_email_domain = RegexValidator(
    regex=r'^[a-zA-Z0-9][a-zA-Z0-9-]{0,61}[a-zA-Z0-9]?\.[a-zA-Z]{2,}$',
    message='must be a valid domain format'
)


class Company(TimeStampedModel, SlugModel):
    """
    Tenant boundary. Every job, candidate, application and user belongs to
    exactly one company.
    """
    name = models.CharField(
        max_length=100, validators=[MinLengthValidator(2)], db_index=True
    )
    email_domain = models.CharField(
        max_length=255, blank=True, validators=[validate_email_domain]
    )

    class Meta:
        ordering = ('name',)
        verbose_name_plural = 'companies'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        self.email_domain = (self.email_domain or '').strip().lower()
        return super().save(*args, **kwargs)
