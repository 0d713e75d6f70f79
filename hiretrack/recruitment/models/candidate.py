from django.db import models

from hiretrack.common.models import TimeStampedModel
from hiretrack.organization.models import Company


class CandidateQuerySet(models.QuerySet):
    def for_company(self, company_id):
        return self.filter(company_id=company_id)


class Candidate(TimeStampedModel):
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name='candidates'
    )
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150, blank=True)
    email = models.EmailField(max_length=255)

    objects = CandidateQuerySet.as_manager()

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return ' '.join(filter(None, [self.first_name, self.last_name]))
