import logging

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError
from django.utils import timezone

from hiretrack.core.utils.common import append_note
from hiretrack.core.validation_messages import (
    INVALID_STAGE_MESSAGE, TERMINAL_APPLICATION_MESSAGE,
    DUPLICATE_APPLICATION_MESSAGE
)
from hiretrack.recruitment.constants import PIPELINE_STAGES, REJECTED, APPLIED
from hiretrack.recruitment.models import Application
from hiretrack.recruitment.signals import application_stage_changed
from hiretrack.recruitment.utils.guards import (
    ensure_in_company, ensure_participants
)
from hiretrack.recruitment.utils.rules import normalize_and_validate
from hiretrack.recruitment.utils.states import (
    next_application_status, EXTEND_OFFER, ACCEPT_OFFER, REJECT, WITHDRAW
)

logger = logging.getLogger(__name__)


def submit_application(company_id, job, candidate, source='',
                       cover_letter='', applied_at=None):
    """
    Create the application of `candidate` to `job` in `applied` status.

    :raises TenantMismatchError: job or candidate is from another company
    :raises ValidationError: duplicate application or invalid fields
    """
    ensure_in_company(company_id, job=job, candidate=candidate)
    application = Application(
        company_id=company_id,
        job=job,
        candidate=candidate,
        status=APPLIED,
        source=source or '',
        cover_letter=cover_letter or '',
        applied_at=applied_at or timezone.now()
    )
    normalize_and_validate(application)
    try:
        with transaction.atomic():
            application.save()
    except IntegrityError as e:
        # lost the race against a concurrent submission
        raise ValidationError(
            {'candidate': DUPLICATE_APPLICATION_MESSAGE}
        ) from e
    logger.info(
        f"{candidate} applied to {job} (application {application.id})."
    )
    return application


class ApplicationPipeline:
    """
    Moves an application through the hiring pipeline.

    Every operation locks the application row, checks the transition against
    the transition table, stamps `stage_changed_at`/`stage_changed_by` and
    appends the given note. Invalid transitions and invalid field values raise
    ``ValidationError`` and nothing is written.

    :param application: Application to move
    :param company_id: company the caller is acting for
    :param changed_by: user performing the change, stamped on the application
    """

    def __init__(self, application, company_id, changed_by=None):
        self.application = application
        self.company_id = company_id
        self.changed_by = changed_by

    def advance_to(self, stage, notes=None):
        """Stages can be visited in any order while the application is open."""
        if stage not in PIPELINE_STAGES:
            raise ValidationError(
                {'status': INVALID_STAGE_MESSAGE.format(stage=stage)}
            )
        return self._transition(stage, notes)

    def extend_offer(self, salary=None, notes=None):
        changes = {'salary_offered': salary} if salary is not None else {}
        return self._transition(EXTEND_OFFER, notes, **changes)

    def accept_offer(self, notes=None):
        return self._transition(ACCEPT_OFFER, notes)

    def reject(self, reason=None, notes=None):
        return self._transition(REJECT, notes, rejection_reason=reason or '')

    def withdraw(self, reason=None, notes=None):
        return self._transition(WITHDRAW, notes, rejection_reason=reason or '')

    def _transition(self, action, notes=None, **changes):
        with transaction.atomic():
            application = Application.objects.select_for_update().get(
                pk=self.application.pk
            )
            ensure_in_company(self.company_id, application=application)
            ensure_participants(application, stage_changed_by=self.changed_by)

            from_status = application.status
            to_status = next_application_status(from_status, action)
            if to_status is None:
                logger.warning(
                    f"Refused to {action} application {application.id} "
                    f"in {from_status} status."
                )
                raise ValidationError({
                    'status': TERMINAL_APPLICATION_MESSAGE.format(
                        status=from_status
                    )
                })

            now = timezone.now()
            for field, value in changes.items():
                setattr(application, field, value)
            application.status = to_status
            application.stage_changed_at = now
            application.stage_changed_by = self.changed_by
            if to_status == REJECTED:
                application.rejected_at = now
            application.notes = append_note(application.notes, notes)

            normalize_and_validate(application)
            application.save()

        logger.info(
            f"Application {application.id} moved from {from_status} to "
            f"{to_status} by {self.changed_by}."
        )
        self.application.refresh_from_db()
        application_stage_changed.send(
            sender=Application,
            application=self.application,
            from_status=from_status,
            to_status=to_status,
            changed_by=self.changed_by
        )
        return self.application
