import re

from django.conf import settings
from django.core.validators import MaxLengthValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

from hiretrack.common.models import TimeStampedModel, MetadataModel
from hiretrack.core.utils.common import (
    format_timezone, local_date, round_half_up
)
from hiretrack.core.validation_messages import DURATION_RANGE_MESSAGE
from hiretrack.core.validators import (
    MinMaxValueValidator, validate_rating, validate_http_url
)
from hiretrack.recruitment.constants import (
    INTERVIEW_TYPE_CHOICES, INTERVIEW_STATUS_CHOICES, DECISION_CHOICES,
    SCHEDULED, COMPLETED, CANCELLED, NO_SHOW, ONSITE, VIDEO,
    OPEN_INTERVIEW_STATUSES, REMOTE_INTERVIEW_TYPES, POSITIVE_DECISIONS,
    NEGATIVE_DECISIONS, DEFAULT_INTERVIEW_DURATIONS,
    MIN_INTERVIEW_DURATION, MAX_INTERVIEW_DURATION
)
from hiretrack.recruitment.models.application import Application
from hiretrack.recruitment.utils import states
from hiretrack.recruitment.utils.rules import validate_interview

URL_SCHEME = re.compile(r'^https?://', re.IGNORECASE)


class InterviewQuerySet(models.QuerySet):
    def for_company(self, company_id):
        return self.filter(application__company_id=company_id)

    def for_application(self, application):
        return self.filter(application=application)

    def for_interviewer(self, interviewer):
        return self.filter(interviewer=interviewer)

    def by_type(self, interview_type):
        return self.filter(interview_type=interview_type)

    def by_status(self, status):
        return self.filter(status=status)

    def active(self):
        return self.filter(status__in=OPEN_INTERVIEW_STATUSES)

    def upcoming(self):
        return self.active().filter(
            scheduled_at__gt=timezone.now()
        ).order_by('scheduled_at')

    def past(self):
        return self.filter(scheduled_at__lte=timezone.now())

    def completed(self):
        return self.filter(status=COMPLETED)

    def cancelled(self):
        return self.filter(status=CANCELLED)

    def no_shows(self):
        return self.filter(status=NO_SHOW)

    def needs_feedback(self):
        return self.completed().filter(feedback='')

    def positive_decisions(self):
        return self.filter(decision__in=POSITIVE_DECISIONS)

    def negative_decisions(self):
        return self.filter(decision__in=NEGATIVE_DECISIONS)

    def remote(self):
        return self.filter(interview_type__in=REMOTE_INTERVIEW_TYPES)

    def scheduled_between(self, start, end):
        return self.filter(scheduled_at__range=(start, end))

    def scheduled_for_date(self, date):
        return self.filter(scheduled_at__date=date)


class Interview(TimeStampedModel, MetadataModel):
    application = models.ForeignKey(
        Application,
        on_delete=models.CASCADE,
        related_name='interviews'
    )
    interviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='conducted_interviews'
    )
    scheduled_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='scheduled_interviews'
    )
    interview_type = models.CharField(
        choices=INTERVIEW_TYPE_CHOICES,
        max_length=20,
        db_index=True
    )
    status = models.CharField(
        choices=INTERVIEW_STATUS_CHOICES,
        max_length=20,
        db_index=True,
        default=SCHEDULED
    )
    scheduled_at = models.DateTimeField(db_index=True)
    duration_minutes = models.PositiveSmallIntegerField(
        validators=[MinMaxValueValidator(
            MIN_INTERVIEW_DURATION, MAX_INTERVIEW_DURATION,
            message=DURATION_RANGE_MESSAGE
        )]
    )
    location = models.CharField(max_length=255, blank=True)
    video_link = models.CharField(
        max_length=500, blank=True, validators=[validate_http_url]
    )
    calendar_event_id = models.CharField(max_length=100, blank=True)

    feedback = models.TextField(
        max_length=2000, blank=True, validators=[MaxLengthValidator(2000)]
    )
    notes = models.TextField(
        max_length=1000, blank=True, validators=[MaxLengthValidator(1000)]
    )
    completed_at = models.DateTimeField(null=True, blank=True)
    decision = models.CharField(
        choices=DECISION_CHOICES,
        max_length=20,
        blank=True
    )
    rating = models.PositiveSmallIntegerField(
        null=True, blank=True, validators=[validate_rating]
    )

    objects = InterviewQuerySet.as_manager()

    class Meta:
        ordering = ('scheduled_at',)
        constraints = [
            models.CheckConstraint(
                condition=Q(interview_type__in=[
                    interview_type for interview_type, _ in INTERVIEW_TYPE_CHOICES
                ]),
                name='interview_type_valid'
            ),
            models.CheckConstraint(
                condition=Q(status__in=[
                    status for status, _ in INTERVIEW_STATUS_CHOICES
                ]),
                name='interview_status_valid'
            ),
            models.CheckConstraint(
                condition=Q(decision='') | Q(decision__in=[
                    decision for decision, _ in DECISION_CHOICES
                ]),
                name='interview_decision_valid'
            ),
            models.CheckConstraint(
                condition=(
                    Q(status=COMPLETED, completed_at__isnull=False) |
                    (~Q(status=COMPLETED) & Q(completed_at__isnull=True))
                ),
                name='interview_completed_at_consistency'
            ),
            models.CheckConstraint(
                condition=Q(decision='') | Q(status=COMPLETED),
                name='interview_decision_requires_completion'
            ),
            models.CheckConstraint(
                condition=Q(rating__isnull=True) | Q(rating__gte=1, rating__lte=5),
                name='interview_rating_range'
            ),
            models.CheckConstraint(
                condition=Q(
                    duration_minutes__gte=MIN_INTERVIEW_DURATION,
                    duration_minutes__lte=MAX_INTERVIEW_DURATION
                ),
                name='interview_duration_range'
            ),
        ]

    def __str__(self):
        return f"{self.get_interview_type_display()} - {self.application}"

    def normalize(self):
        """
        Trim free text, prefix the video link with a scheme and fill the
        default duration of the interview type when none was given.
        """
        self.location = (self.location or '').strip()
        self.video_link = (self.video_link or '').strip()
        if self.video_link and not URL_SCHEME.match(self.video_link):
            self.video_link = f"https://{self.video_link}"
        if self.duration_minutes is None:
            self.duration_minutes = DEFAULT_INTERVIEW_DURATIONS.get(
                self.interview_type
            )

    def clean(self):
        validate_interview(self, creating=self._state.adding)

    # Transition guards

    @property
    def can_be_confirmed(self):
        return states.can_be_confirmed(self.status)

    @property
    def can_be_completed(self):
        return states.can_be_completed(self.status, self.scheduled_at)

    @property
    def can_be_cancelled(self):
        return states.can_be_cancelled(self.status)

    @property
    def can_be_marked_no_show(self):
        return states.can_be_marked_no_show(self.status, self.scheduled_at)

    @property
    def can_be_rescheduled(self):
        return states.can_be_rescheduled(self.status)

    # Scheduling

    @property
    def end_time(self):
        return self.scheduled_at + timezone.timedelta(
            minutes=self.duration_minutes
        )

    @property
    def is_upcoming(self):
        return (
            self.status in OPEN_INTERVIEW_STATUSES and
            self.scheduled_at > timezone.now()
        )

    @property
    def is_overdue(self):
        return (
            self.status in OPEN_INTERVIEW_STATUSES and
            self.scheduled_at <= timezone.now()
        )

    @property
    def is_today(self):
        return local_date(self.scheduled_at) == timezone.localdate()

    @property
    def time_until_interview(self):
        """Hours left until the interview, 0 once it has started."""
        seconds = (self.scheduled_at - timezone.now()).total_seconds()
        return round_half_up(seconds / 3600) if seconds > 0 else 0

    @property
    def days_until_interview(self):
        days = (local_date(self.scheduled_at) - timezone.localdate()).days
        return max(days, 0)

    @property
    def duration_in_hours(self):
        return round_half_up(self.duration_minutes / 60)

    @property
    def scheduled_time_range(self):
        start = format_timezone(self.scheduled_at, "%I:%M %p")
        end = format_timezone(self.end_time, "%I:%M %p")
        return f"{start} - {end}"

    # Type

    @property
    def requires_location(self):
        return self.interview_type == ONSITE

    @property
    def requires_video_link(self):
        return self.interview_type == VIDEO

    @property
    def is_remote(self):
        return self.interview_type in REMOTE_INTERVIEW_TYPES

    # Outcome

    @property
    def has_positive_decision(self):
        return self.decision in POSITIVE_DECISIONS

    @property
    def has_negative_decision(self):
        return self.decision in NEGATIVE_DECISIONS

    @property
    def has_feedback(self):
        return bool((self.feedback or '').strip())

    @property
    def needs_feedback(self):
        return self.status == COMPLETED and not self.has_feedback

    # Display

    @property
    def interview_type_humanized(self):
        return self.get_interview_type_display()

    @property
    def status_humanized(self):
        return self.get_status_display()

    @property
    def decision_humanized(self):
        return self.get_decision_display() if self.decision else 'No decision'

    @property
    def rating_display(self):
        if self.rating is None:
            return 'Not rated'
        return f"{self.rating}/5 {'★' * self.rating}{'☆' * (5 - self.rating)}"

    @property
    def duration_display(self):
        minutes = self.duration_minutes or 0
        if minutes < 60:
            return f"{minutes} min"
        hours, remaining = divmod(minutes, 60)
        if remaining:
            return f"{hours}h {remaining}m"
        return f"{hours} hour" if hours == 1 else f"{hours} hours"
