from django.core.validators import MinLengthValidator
from django.db import models

from hiretrack.common.models import TimeStampedModel
from hiretrack.organization.models import Company
from hiretrack.recruitment.constants import JOB_STATUS_CHOICES, DRAFT


class JobQuerySet(models.QuerySet):
    def for_company(self, company_id):
        return self.filter(company_id=company_id)


class Job(TimeStampedModel):
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name='jobs'
    )
    title = models.CharField(
        max_length=100, validators=[MinLengthValidator(3)]
    )
    status = models.CharField(
        choices=JOB_STATUS_CHOICES,
        max_length=20,
        db_index=True,
        default=DRAFT
    )

    objects = JobQuerySet.as_manager()

    def __str__(self):
        return self.title
