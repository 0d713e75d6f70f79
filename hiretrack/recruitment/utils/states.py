"""
Transition tables of the application pipeline and the interview lifecycle.

Tables map ``(current status, action)`` to the resulting status. A missing key
means the action is not allowed from that status. Guards take plain values so
they can be evaluated without a database.
"""
from django.utils import timezone

from hiretrack.recruitment.constants import (
    PIPELINE_STAGES, ACTIVE_APPLICATION_STATUSES, OFFER, ACCEPTED, REJECTED,
    WITHDRAWN, SCHEDULED, CONFIRMED, COMPLETED, CANCELLED, NO_SHOW,
    OPEN_INTERVIEW_STATUSES
)

# Application actions. Moving to a pipeline stage uses the stage as action.
EXTEND_OFFER, ACCEPT_OFFER, REJECT, WITHDRAW = (
    'extend_offer', 'accept_offer', 'reject', 'withdraw'
)

APPLICATION_ACTIONS = {
    **{stage: stage for stage in PIPELINE_STAGES},
    EXTEND_OFFER: OFFER,
    ACCEPT_OFFER: ACCEPTED,
    REJECT: REJECTED,
    WITHDRAW: WITHDRAWN,
}

# any open application can take any action, closed ones take none
APPLICATION_TRANSITIONS = {
    (status, action): target
    for status in ACTIVE_APPLICATION_STATUSES
    for action, target in APPLICATION_ACTIONS.items()
}

# Interview actions
CONFIRM, COMPLETE, CANCEL, MARK_NO_SHOW, RESCHEDULE = (
    'confirm', 'complete', 'cancel', 'mark_no_show', 'reschedule'
)

INTERVIEW_TRANSITIONS = {
    (SCHEDULED, CONFIRM): CONFIRMED,
    **{(status, COMPLETE): COMPLETED for status in OPEN_INTERVIEW_STATUSES},
    **{(status, CANCEL): CANCELLED for status in OPEN_INTERVIEW_STATUSES},
    **{(status, MARK_NO_SHOW): NO_SHOW for status in OPEN_INTERVIEW_STATUSES},
    **{(status, RESCHEDULE): SCHEDULED for status in OPEN_INTERVIEW_STATUSES},
}

# actions allowed only once the interview time has come
TIME_GATED_ACTIONS = (COMPLETE, MARK_NO_SHOW)


def next_application_status(status, action):
    return APPLICATION_TRANSITIONS.get((status, action))


def next_interview_status(status, action):
    return INTERVIEW_TRANSITIONS.get((status, action))


def can_transition_interview(status, action, scheduled_at=None, now=None):
    if (status, action) not in INTERVIEW_TRANSITIONS:
        return False
    if action in TIME_GATED_ACTIONS:
        now = now or timezone.now()
        return scheduled_at is not None and scheduled_at <= now
    return True


def can_be_confirmed(status):
    return can_transition_interview(status, CONFIRM)


def can_be_completed(status, scheduled_at, now=None):
    return can_transition_interview(status, COMPLETE, scheduled_at, now)


def can_be_cancelled(status):
    return can_transition_interview(status, CANCEL)


def can_be_marked_no_show(status, scheduled_at, now=None):
    return can_transition_interview(status, MARK_NO_SHOW, scheduled_at, now)


def can_be_rescheduled(status):
    return can_transition_interview(status, RESCHEDULE)
