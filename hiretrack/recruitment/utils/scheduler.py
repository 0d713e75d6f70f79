import logging

from django.db import transaction
from django.utils import timezone

from hiretrack.core.utils.common import append_note
from hiretrack.recruitment.constants import SCHEDULED, COMPLETED
from hiretrack.recruitment.models import Interview
from hiretrack.recruitment.signals import interview_status_changed
from hiretrack.recruitment.utils.guards import (
    ensure_in_company, ensure_interview_participants
)
from hiretrack.recruitment.utils.rules import normalize_and_validate
from hiretrack.recruitment.utils.states import (
    can_transition_interview, next_interview_status,
    CONFIRM, COMPLETE, CANCEL, MARK_NO_SHOW, RESCHEDULE
)

logger = logging.getLogger(__name__)


def schedule_interview(company_id, application, interviewer, interview_type,
                       scheduled_at, scheduled_by=None, duration_minutes=None,
                       location='', video_link='', calendar_event_id='',
                       notes=''):
    """
    Create a `scheduled` interview for `application`.

    The interview must be in the future. Duration defaults to the usual
    length of `interview_type`.

    :raises TenantMismatchError: application, interviewer or scheduler is from
        another company
    :raises ValidationError: invalid or inconsistent fields
    """
    ensure_in_company(company_id, application=application)
    interview = Interview(
        application=application,
        interviewer=interviewer,
        scheduled_by=scheduled_by,
        interview_type=interview_type,
        status=SCHEDULED,
        scheduled_at=scheduled_at,
        duration_minutes=duration_minutes,
        location=location or '',
        video_link=video_link or '',
        calendar_event_id=calendar_event_id or '',
        notes=notes or ''
    )
    ensure_interview_participants(interview)
    normalize_and_validate(interview)
    with transaction.atomic():
        interview.save()
    logger.info(
        f"Scheduled {interview_type} interview {interview.id} for "
        f"application {application.id} at {scheduled_at}."
    )
    return interview


class InterviewScheduler:
    """
    Moves an interview through its lifecycle.

    Operations return False, without writing anything, when the interview
    is not in a state that allows them. Invalid field values still raise
    ``ValidationError`` and a participant from another company raises
    ``TenantMismatchError``.
    """

    def __init__(self, interview, company_id):
        self.interview = interview
        self.company_id = company_id

    def confirm(self):
        return self._transition(CONFIRM)

    def complete(self, feedback=None, rating=None, decision=None, notes=None):
        """
        Only possible once the interview time has come. Outcome fields are
        written only when given, given notes replace the existing ones.
        """
        outcome = (
            ('feedback', feedback), ('rating', rating),
            ('decision', decision), ('notes', notes),
        )
        return self._transition(COMPLETE, **{
            field: value for field, value in outcome
            if value not in (None, '')
        })

    def cancel(self, reason=None):
        return self._transition(
            CANCEL, note=f"Cancelled: {reason}" if reason else None
        )

    def mark_no_show(self, notes=None):
        return self._transition(MARK_NO_SHOW, note=notes)

    def reschedule(self, new_time, changed_by=None, reason=None):
        """
        Move the interview to `new_time` and back to `scheduled`. Unlike
        creation, `new_time` may be in the past.
        """
        changes = {'scheduled_at': new_time}
        if changed_by is not None:
            changes['scheduled_by'] = changed_by
        return self._transition(
            RESCHEDULE,
            note=f"Rescheduled: {reason}" if reason else None,
            **changes
        )

    def _transition(self, action, note=None, **changes):
        with transaction.atomic():
            interview = Interview.objects.select_for_update().get(
                pk=self.interview.pk
            )
            ensure_in_company(
                self.company_id, application=interview.application
            )

            now = timezone.now()
            from_status = interview.status
            if not can_transition_interview(
                from_status, action, interview.scheduled_at, now
            ):
                logger.debug(
                    f"Cannot {action} interview {interview.id} in "
                    f"{from_status} status scheduled at "
                    f"{interview.scheduled_at}."
                )
                return False

            for field, value in changes.items():
                setattr(interview, field, value)
            interview.status = next_interview_status(from_status, action)
            if interview.status == COMPLETED:
                interview.completed_at = now
            interview.notes = append_note(interview.notes, note)

            ensure_interview_participants(interview)
            normalize_and_validate(interview)
            interview.save()

        logger.info(
            f"Interview {interview.id} moved from {from_status} to "
            f"{interview.status}."
        )
        self.interview.refresh_from_db()
        interview_status_changed.send(
            sender=Interview,
            interview=self.interview,
            from_status=from_status,
            to_status=self.interview.status
        )
        return True
