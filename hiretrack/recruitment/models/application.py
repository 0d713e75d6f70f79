from django.conf import settings
from django.core.validators import MinValueValidator, MaxLengthValidator
from django.db import models
from django.db.models import Q, Avg
from django.utils import timezone

from hiretrack.common.models import TimeStampedModel, MetadataModel
from hiretrack.core.utils.common import days_between, round_half_up
from hiretrack.core.validation_messages import SALARY_NEGATIVE_MESSAGE
from hiretrack.core.validators import validate_rating
from hiretrack.organization.models import Company
from hiretrack.recruitment.constants import (
    APPLICATION_STATUS_CHOICES, APPLICATION_SOURCE_CHOICES, APPLIED,
    ACCEPTED, REJECTED, WITHDRAWN, OFFER, PIPELINE_STAGES, INTERVIEW_STAGES,
    NEEDS_ACTION_STAGES, ACTIVE_APPLICATION_STATUSES,
    CLOSED_APPLICATION_STATUSES, COMPLETED
)
from hiretrack.recruitment.models.candidate import Candidate
from hiretrack.recruitment.models.job import Job
from hiretrack.recruitment.utils.rules import validate_application

HIGH_RATING, LOW_RATING = 4, 2


class ApplicationQuerySet(models.QuerySet):
    def for_company(self, company_id):
        return self.filter(company_id=company_id)

    def for_job(self, job):
        return self.filter(job=job)

    def for_candidate(self, candidate):
        return self.filter(candidate=candidate)

    def by_status(self, status):
        return self.filter(status=status)

    def by_source(self, source):
        return self.filter(source=source)

    def active(self):
        return self.filter(status__in=ACTIVE_APPLICATION_STATUSES)

    def closed(self):
        return self.filter(status__in=CLOSED_APPLICATION_STATUSES)

    def in_pipeline(self):
        return self.filter(status__in=PIPELINE_STAGES)

    def needs_action(self):
        return self.filter(status__in=NEEDS_ACTION_STAGES)

    def interview_stage(self):
        return self.filter(status__in=INTERVIEW_STAGES)

    def offer_stage(self):
        return self.filter(status=OFFER)

    def highly_rated(self):
        return self.filter(rating__gte=HIGH_RATING)

    def poorly_rated(self):
        return self.filter(rating__lte=LOW_RATING)

    def with_offer(self):
        return self.filter(salary_offered__isnull=False)

    def applied_between(self, start, end):
        return self.filter(applied_at__range=(start, end))

    def recent(self, days=30):
        return self.filter(
            applied_at__gte=timezone.now() - timezone.timedelta(days=days)
        )


class Application(TimeStampedModel, MetadataModel):
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    job = models.ForeignKey(
        Job,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    candidate = models.ForeignKey(
        Candidate,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    status = models.CharField(
        choices=APPLICATION_STATUS_CHOICES,
        max_length=50,
        db_index=True,
        default=APPLIED
    )
    source = models.CharField(
        choices=APPLICATION_SOURCE_CHOICES,
        max_length=100,
        blank=True
    )
    cover_letter = models.TextField(
        max_length=5000, blank=True, validators=[MaxLengthValidator(5000)]
    )
    notes = models.TextField(
        max_length=2000, blank=True, validators=[MaxLengthValidator(2000)]
    )
    rejection_reason = models.CharField(max_length=255, blank=True)

    applied_at = models.DateTimeField(default=timezone.now, db_index=True)
    stage_changed_at = models.DateTimeField(null=True, blank=True)
    stage_changed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='changed_application_stages'
    )
    rejected_at = models.DateTimeField(null=True, blank=True)

    # USD cents
    salary_offered = models.BigIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0, message=SALARY_NEGATIVE_MESSAGE)]
    )
    rating = models.PositiveSmallIntegerField(
        null=True, blank=True, validators=[validate_rating]
    )

    objects = ApplicationQuerySet.as_manager()

    class Meta:
        ordering = ('-applied_at',)
        constraints = [
            models.UniqueConstraint(
                fields=['candidate', 'job'],
                name='unique_application_per_candidate_job'
            ),
            models.CheckConstraint(
                condition=Q(status__in=[
                    status for status, _ in APPLICATION_STATUS_CHOICES
                ]),
                name='application_status_valid'
            ),
            models.CheckConstraint(
                condition=(
                    Q(status=REJECTED, rejected_at__isnull=False) |
                    (~Q(status=REJECTED) & Q(rejected_at__isnull=True))
                ),
                name='application_rejected_at_consistency'
            ),
            models.CheckConstraint(
                condition=Q(rating__isnull=True) | Q(rating__gte=1, rating__lte=5),
                name='application_rating_range'
            ),
            models.CheckConstraint(
                condition=Q(salary_offered__isnull=True) | Q(salary_offered__gte=0),
                name='application_salary_offered_positive'
            ),
        ]

    def __str__(self):
        return f"{self.candidate} - {self.job}"

    def normalize(self):
        self.source = (self.source or '').strip().lower()
        self.rejection_reason = (self.rejection_reason or '').strip()

    def clean(self):
        validate_application(self)

    # Pipeline position

    @property
    def is_active(self):
        return self.status in ACTIVE_APPLICATION_STATUSES

    @property
    def is_closed(self):
        return self.status in CLOSED_APPLICATION_STATUSES

    @property
    def needs_action(self):
        return self.status in NEEDS_ACTION_STAGES

    @property
    def in_interview_stage(self):
        return self.status in INTERVIEW_STAGES

    @property
    def is_rejected(self):
        return self.status == REJECTED

    @property
    def is_accepted(self):
        return self.status == ACCEPTED

    @property
    def is_withdrawn(self):
        return self.status == WITHDRAWN

    @property
    def has_offer(self):
        return self.salary_offered is not None

    @property
    def is_rated(self):
        return self.rating is not None

    @property
    def is_highly_rated(self):
        return self.is_rated and self.rating >= HIGH_RATING

    @property
    def days_since_applied(self):
        return days_between(self.applied_at, timezone.now())

    @property
    def days_in_current_stage(self):
        return days_between(
            self.stage_changed_at or self.applied_at, timezone.now()
        )

    @property
    def time_to_hire(self):
        """Days from application to the last update, for accepted ones only"""
        if not self.is_accepted:
            return None
        return days_between(self.applied_at, self.modified_at)

    # Interviews

    @property
    def upcoming_interviews(self):
        return self.interviews.upcoming()

    @property
    def past_interviews(self):
        return self.interviews.past()

    @property
    def completed_interviews(self):
        return self.interviews.filter(status=COMPLETED)

    @property
    def average_interview_rating(self):
        average = self.completed_interviews.filter(
            rating__isnull=False
        ).aggregate(average=Avg('rating'))['average']
        return round_half_up(average) if average is not None else None

    # Display

    @property
    def status_humanized(self):
        return self.get_status_display()

    @property
    def source_humanized(self):
        return self.get_source_display() if self.source else 'Not specified'

    @property
    def formatted_salary_offered(self):
        if self.salary_offered is None:
            return 'No offer made'
        return f"${round_half_up(self.salary_offered / 100, 0):,.0f}"

    @property
    def rating_display(self):
        if not self.is_rated:
            return 'Not rated'
        return f"{self.rating}/5 {'★' * self.rating}{'☆' * (5 - self.rating)}"
