"""
Checks that records meeting in one write belong to the same company.

Failures raise ``TenantMismatchError`` rather than ``ValidationError``: the
input is well formed, it just points across a tenant boundary.
"""
import logging

from hiretrack.core.exceptions import TenantMismatchError
from hiretrack.core.utils import nested_getattr
from hiretrack.core.validation_messages import (
    SAME_COMPANY_AS_APPLICATION_MESSAGE, OUTSIDE_TENANT_MESSAGE
)

logger = logging.getLogger(__name__)


def belongs_to_company(record, company_id):
    """True when `record` is absent or scoped to `company_id`."""
    if record is None:
        return True
    return nested_getattr(record, 'company_id') == company_id


def ensure_in_company(company_id, **records):
    """
    Every record passed as keyword must belong to `company_id`.

    :raises TenantMismatchError: keyed by the names of the offending records
    """
    errors = {
        field: OUTSIDE_TENANT_MESSAGE
        for field, record in records.items()
        if not belongs_to_company(record, company_id)
    }
    if errors:
        logger.warning(
            f"Rejected access to {', '.join(sorted(errors))} "
            f"from company {company_id}."
        )
        raise TenantMismatchError(errors)


def ensure_participants(application, **participants):
    """
    Users acting on an application (interviewer, scheduler, stage changer)
    must belong to the application's company.
    """
    errors = {
        field: SAME_COMPANY_AS_APPLICATION_MESSAGE
        for field, user in participants.items()
        if not belongs_to_company(user, application.company_id)
    }
    if errors:
        logger.warning(
            f"{', '.join(sorted(errors))} of application {application.id} "
            f"belong to a different company."
        )
        raise TenantMismatchError(errors)


def ensure_interview_participants(interview):
    ensure_participants(
        interview.application,
        interviewer=interview.interviewer,
        scheduled_by=interview.scheduled_by
    )
