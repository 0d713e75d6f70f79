"""
Consistency rules for applications and interviews.

Every rule is a plain function of field values. A rule returns nothing when the
combination is valid and raises ``ValidationError`` keyed by the offending
field otherwise. ``check_rules`` runs a list of rules and reports every
violation at once.
"""
from django.core.exceptions import ValidationError
from django.utils import timezone

from hiretrack.core.validation_messages import (
    COMPLETED_AT_REQUIRED_MESSAGE, COMPLETED_AT_NOT_ALLOWED_MESSAGE,
    REJECTED_AT_REQUIRED_MESSAGE, REJECTED_AT_NOT_ALLOWED_MESSAGE,
    DECISION_REQUIRES_COMPLETION_MESSAGE, LOCATION_REQUIRED_MESSAGE,
    VIDEO_LINK_REQUIRED_MESSAGE, SCHEDULED_AT_IN_PAST_MESSAGE,
    APPLIED_AT_IN_FUTURE_MESSAGE, DUPLICATE_APPLICATION_MESSAGE
)
from hiretrack.recruitment.constants import (
    COMPLETED, REJECTED, ONSITE, VIDEO
)


def completion_consistency(status, completed_at):
    if status == COMPLETED and not completed_at:
        raise ValidationError({'completed_at': COMPLETED_AT_REQUIRED_MESSAGE})
    if status != COMPLETED and completed_at:
        raise ValidationError({'completed_at': COMPLETED_AT_NOT_ALLOWED_MESSAGE})


def rejection_consistency(status, rejected_at):
    if status == REJECTED and not rejected_at:
        raise ValidationError({'rejected_at': REJECTED_AT_REQUIRED_MESSAGE})
    if status != REJECTED and rejected_at:
        raise ValidationError({'rejected_at': REJECTED_AT_NOT_ALLOWED_MESSAGE})


def decision_requires_completion(status, decision):
    if decision and status != COMPLETED:
        raise ValidationError(
            {'decision': DECISION_REQUIRES_COMPLETION_MESSAGE}
        )


def location_required_for_onsite(interview_type, location):
    if interview_type == ONSITE and not (location or '').strip():
        raise ValidationError({'location': LOCATION_REQUIRED_MESSAGE})


def video_link_required_for_video(interview_type, video_link):
    if interview_type == VIDEO and not (video_link or '').strip():
        raise ValidationError({'video_link': VIDEO_LINK_REQUIRED_MESSAGE})


def scheduled_at_not_in_past(scheduled_at, now=None):
    # only checked when the interview is created
    now = now or timezone.now()
    if scheduled_at and scheduled_at <= now:
        raise ValidationError({'scheduled_at': SCHEDULED_AT_IN_PAST_MESSAGE})


def applied_at_not_in_future(applied_at, now=None):
    now = now or timezone.now()
    if applied_at and applied_at > now:
        raise ValidationError({'applied_at': APPLIED_AT_IN_FUTURE_MESSAGE})


def one_application_per_job(application):
    from hiretrack.recruitment.models import Application

    if not (application.candidate_id and application.job_id):
        return
    duplicate = Application.objects.filter(
        candidate_id=application.candidate_id,
        job_id=application.job_id
    ).exclude(pk=application.pk).exists()
    if duplicate:
        raise ValidationError({'candidate': DUPLICATE_APPLICATION_MESSAGE})


def check_rules(*rules):
    """
    Run every ``(rule, args)`` pair and raise one ``ValidationError`` holding
    the messages of all failed rules.
    """
    errors = {}
    for rule, args in rules:
        try:
            rule(*args)
        except ValidationError as e:
            errors = e.update_error_dict(errors)
    if errors:
        raise ValidationError(errors)


def validate_application(application):
    check_rules(
        (rejection_consistency, (application.status, application.rejected_at)),
        (applied_at_not_in_future, (application.applied_at,)),
        (one_application_per_job, (application,)),
    )


def validate_interview(interview, creating=False):
    rules = [
        (completion_consistency, (interview.status, interview.completed_at)),
        (decision_requires_completion, (interview.status, interview.decision)),
        (location_required_for_onsite,
         (interview.interview_type, interview.location)),
        (video_link_required_for_video,
         (interview.interview_type, interview.video_link)),
    ]
    if creating:
        rules.append((scheduled_at_not_in_past, (interview.scheduled_at,)))
    check_rules(*rules)


def normalize_and_validate(instance):
    """
    First step of every write: normalise fields, then run field validators
    and the consistency rules. Database constraints are left to the
    database.
    """
    instance.normalize()
    instance.full_clean(validate_constraints=False)
