import datetime

from django.core.exceptions import ValidationError
from django.utils import timezone

from hiretrack.common.tests.common import BaseTestCase
from hiretrack.core.exceptions import TenantMismatchError
from hiretrack.organization.tests.factory import CompanyFactory
from hiretrack.recruitment.constants import (
    PHONE, VIDEO, ONSITE, TECHNICAL, PANEL, BEHAVIORAL, SCHEDULED,
    CONFIRMED, COMPLETED, CANCELLED, NO_SHOW, YES, STRONG_NO, MAYBE,
    APPLIED
)
from hiretrack.recruitment.models import Interview
from hiretrack.recruitment.signals import interview_status_changed
from hiretrack.recruitment.tests.factory import (
    ApplicationFactory, InterviewFactory
)
from hiretrack.recruitment.utils.rules import normalize_and_validate
from hiretrack.recruitment.utils.scheduler import (
    InterviewScheduler, schedule_interview
)
from hiretrack.users.constants import INTERVIEWER
from hiretrack.users.tests.factory import UserFactory


class TestScheduleInterview(BaseTestCase):
    def setUp(self):
        self.application = ApplicationFactory()
        self.company = self.application.company
        self.interviewer = UserFactory(company=self.company, role=INTERVIEWER)
        self.coordinator = UserFactory(company=self.company)
        self.tomorrow = timezone.now() + timezone.timedelta(days=1)

    def schedule(self, **kwargs):
        data = dict(
            company_id=self.company.id,
            application=self.application,
            interviewer=self.interviewer,
            interview_type=PHONE,
            scheduled_at=self.tomorrow,
        )
        data.update(kwargs)
        return schedule_interview(**data)

    def test_default_duration_by_type(self):
        durations = {
            PHONE: 30, VIDEO: 45, TECHNICAL: 90, PANEL: 90,
            BEHAVIORAL: 60, ONSITE: 60
        }
        for interview_type, duration in durations.items():
            with self.atomicSubTest(interview_type=interview_type):
                interview = self.schedule(
                    interview_type=interview_type,
                    location='Room A',
                    video_link='https://meet.example.com/abc'
                )
                self.assertEqual(interview.duration_minutes, duration)
                self.assertEqual(interview.status, SCHEDULED)

    def test_given_duration_is_kept(self):
        interview = self.schedule(duration_minutes=50)
        self.assertEqual(interview.duration_minutes, 50)
        interview.interview_type = TECHNICAL
        normalize_and_validate(interview)
        self.assertEqual(interview.duration_minutes, 50)

    def test_duration_bounds(self):
        for duration in (0, 481):
            with self.atomicSubTest(duration=duration):
                with self.assertRaises(ValidationError) as context:
                    self.schedule(duration_minutes=duration)
                self.assertFieldErrors(context.exception, 'duration_minutes')

    def test_onsite_requires_location(self):
        with self.assertRaises(ValidationError) as context:
            self.schedule(interview_type=ONSITE, location=None)
        self.assertEqual(
            context.exception.message_dict,
            {'location': ['is required for onsite interviews']}
        )

        interview = self.schedule(interview_type=ONSITE, location='Room A')
        self.assertEqual(interview.location, 'Room A')
        self.assertEqual(interview.duration_minutes, 60)
        self.assertTrue(interview.requires_location)
        self.assertFalse(interview.is_remote)

    def test_video_requires_link(self):
        with self.assertRaises(ValidationError) as context:
            self.schedule(interview_type=VIDEO)
        self.assertFieldErrors(context.exception, 'video_link')

        interview = self.schedule(
            interview_type=VIDEO, video_link=' zoom.us/j/123 '
        )
        self.assertEqual(interview.video_link, 'https://zoom.us/j/123')
        normalize_and_validate(interview)
        self.assertEqual(interview.video_link, 'https://zoom.us/j/123')
        self.assertTrue(interview.is_remote)
        self.assertTrue(interview.requires_video_link)

    def test_video_link_scheme_is_kept(self):
        interview = self.schedule(
            interview_type=VIDEO, video_link='http://meet.example.com/abc'
        )
        self.assertEqual(interview.video_link, 'http://meet.example.com/abc')

    def test_invalid_video_link(self):
        with self.assertRaises(ValidationError) as context:
            self.schedule(interview_type=VIDEO, video_link='not a link')
        self.assertFieldErrors(context.exception, 'video_link')

    def test_scheduled_at_must_be_in_future(self):
        with self.assertRaises(ValidationError) as context:
            self.schedule(scheduled_at=timezone.now() - timezone.timedelta(hours=1))
        self.assertEqual(
            context.exception.message_dict,
            {'scheduled_at': ['must be in the future']}
        )

    def test_unknown_type(self):
        with self.assertRaises(ValidationError) as context:
            self.schedule(interview_type='coffee')
        self.assertIn('interview_type', context.exception.message_dict)

    def test_participants_of_other_company(self):
        outsider = UserFactory()
        with self.assertRaises(TenantMismatchError) as context:
            self.schedule(interviewer=outsider, scheduled_by=outsider)
        self.assertEqual(context.exception.fields, ['interviewer', 'scheduled_by'])
        self.assertNotIsInstance(context.exception, ValidationError)
        self.assertFalse(Interview.objects.exists())

    def test_application_of_other_company(self):
        with self.assertRaises(TenantMismatchError) as context:
            self.schedule(company_id=CompanyFactory().id)
        self.assertEqual(context.exception.fields, ['application'])

    def test_scheduling_does_not_move_application(self):
        self.schedule(scheduled_by=self.coordinator)
        self.application.refresh_from_db()
        self.assertEqual(self.application.status, APPLIED)
        self.assertIsNone(self.application.stage_changed_at)


class TestInterviewScheduler(BaseTestCase):
    def setUp(self):
        self.interview = InterviewFactory(notes='Bring ID')
        self.company_id = self.interview.application.company_id
        self.scheduler = InterviewScheduler(self.interview, self.company_id)
        self.after_start = self.interview.scheduled_at + timezone.timedelta(minutes=5)

    def test_confirm(self):
        self.assertTrue(self.scheduler.confirm())
        self.assertEqual(self.interview.status, CONFIRMED)
        self.assertFalse(self.scheduler.confirm())
        self.assertEqual(self.interview.status, CONFIRMED)

    def test_complete_before_interview_time(self):
        self.assertFalse(self.scheduler.complete(feedback='Great', rating=5))
        self.interview.refresh_from_db()
        self.assertEqual(self.interview.status, SCHEDULED)
        self.assertIsNone(self.interview.completed_at)
        self.assertEqual(self.interview.feedback, '')

    def test_complete(self):
        self.scheduler.confirm()
        with self.frozen_at(self.after_start):
            completed = self.scheduler.complete(
                feedback='Solid answers', rating=4, decision=YES,
                notes='Follow up on system design'
            )
        self.assertTrue(completed)
        self.assertEqual(self.interview.status, COMPLETED)
        self.assertEqual(self.interview.completed_at, self.after_start)
        self.assertEqual(self.interview.rating, 4)
        self.assertEqual(self.interview.decision_humanized, 'Yes')
        self.assertEqual(self.interview.notes, 'Follow up on system design')
        self.assertTrue(self.interview.has_positive_decision)
        self.assertFalse(self.interview.needs_feedback)
        self.assertFalse(self.scheduler.cancel(reason='Too late'))

    def test_complete_keeps_fields_not_given(self):
        self.interview.rating = 3
        self.interview.save()
        self.assertTrue(self.scheduler.reschedule(
            self.interview.scheduled_at, reason='Room clash'
        ))
        with self.frozen_at(self.after_start):
            self.assertTrue(self.scheduler.complete(feedback='Good'))
        self.assertEqual(self.interview.status, COMPLETED)
        self.assertEqual(self.interview.feedback, 'Good')
        self.assertEqual(self.interview.rating, 3)
        self.assertEqual(self.interview.decision, '')
        self.assertEqual(
            self.interview.notes, 'Bring ID\n\nRescheduled: Room clash'
        )

    def test_complete_with_invalid_rating(self):
        with self.frozen_at(self.after_start):
            with self.assertRaises(ValidationError) as context:
                self.scheduler.complete(rating=7, decision=STRONG_NO)
        self.assertFieldErrors(context.exception, 'rating')
        self.interview.refresh_from_db()
        self.assertEqual(self.interview.status, SCHEDULED)

    def test_decision_only_on_completed_interview(self):
        self.interview.decision = MAYBE
        with self.assertRaises(ValidationError) as context:
            normalize_and_validate(self.interview)
        self.assertEqual(
            context.exception.message_dict,
            {'decision': ['can only be set when interview is completed']}
        )

    def test_cancel(self):
        self.assertTrue(self.scheduler.cancel(reason='Candidate unavailable'))
        self.assertEqual(self.interview.status, CANCELLED)
        self.assertEqual(
            self.interview.notes, 'Bring ID\n\nCancelled: Candidate unavailable'
        )
        self.assertFalse(self.scheduler.confirm())
        self.assertFalse(self.scheduler.reschedule(self.after_start))

    def test_mark_no_show(self):
        self.assertFalse(self.scheduler.mark_no_show())
        with self.frozen_at(self.after_start):
            self.assertTrue(self.scheduler.mark_no_show(notes='Did not join'))
        self.assertEqual(self.interview.status, NO_SHOW)
        self.assertEqual(self.interview.notes, 'Bring ID\n\nDid not join')
        self.assertIsNone(self.interview.completed_at)

    def test_reschedule(self):
        coordinator = UserFactory(company=self.interview.application.company)
        self.scheduler.confirm()
        yesterday = timezone.now() - timezone.timedelta(days=1)

        self.assertTrue(self.scheduler.reschedule(
            yesterday, changed_by=coordinator, reason='Interviewer sick'
        ))
        self.assertEqual(self.interview.status, SCHEDULED)
        self.assertEqual(self.interview.scheduled_at, yesterday)
        self.assertEqual(self.interview.scheduled_by, coordinator)
        self.assertEqual(
            self.interview.notes, 'Bring ID\n\nRescheduled: Interviewer sick'
        )
        self.assertTrue(self.interview.is_overdue)
        self.assertTrue(self.interview.can_be_completed)

    def test_reschedule_keeps_scheduler_without_changed_by(self):
        scheduled_by = self.interview.scheduled_by
        self.assertTrue(self.scheduler.reschedule(self.after_start))
        self.assertEqual(self.interview.scheduled_by, scheduled_by)
        self.assertEqual(self.interview.notes, 'Bring ID')

    def test_reschedule_by_other_company(self):
        with self.assertRaises(TenantMismatchError):
            self.scheduler.reschedule(self.after_start, changed_by=UserFactory())
        self.interview.refresh_from_db()
        self.assertNotEqual(self.interview.scheduled_at, self.after_start)

    def test_acting_for_other_company(self):
        scheduler = InterviewScheduler(self.interview, CompanyFactory().id)
        with self.assertRaises(TenantMismatchError):
            scheduler.confirm()

    def test_status_signal(self):
        received = []

        def receiver(sender, **kwargs):
            received.append((kwargs['from_status'], kwargs['to_status']))

        interview_status_changed.connect(receiver)
        self.addCleanup(interview_status_changed.disconnect, receiver)

        self.scheduler.confirm()
        self.scheduler.confirm()
        self.scheduler.cancel()
        self.assertEqual(received, [(SCHEDULED, CONFIRMED), (CONFIRMED, CANCELLED)])


class TestInterviewQueries(BaseTestCase):
    def test_duration_display(self):
        cases = {30: '30 min', 45: '45 min', 60: '1 hour', 90: '1h 30m', 120: '2 hours'}
        for minutes, display in cases.items():
            interview = Interview(duration_minutes=minutes)
            self.assertEqual(interview.duration_display, display)

    def test_display(self):
        interview = InterviewFactory(interview_type=ONSITE, location='Room A', rating=3)
        self.assertEqual(interview.interview_type_humanized, 'On-site Interview')
        self.assertEqual(interview.status_humanized, 'Scheduled')
        self.assertEqual(interview.decision_humanized, 'No decision')
        self.assertEqual(interview.rating_display, '3/5 ★★★☆☆')
        self.assertEqual(interview.duration_in_hours, 0.5)

    def test_timing(self):
        moment = timezone.make_aware(datetime.datetime(2024, 5, 1, 9, 0))
        with self.frozen_at(moment):
            interview = InterviewFactory(
                scheduled_at=moment + timezone.timedelta(hours=2, minutes=15)
            )
            self.assertTrue(interview.is_upcoming)
            self.assertFalse(interview.is_overdue)
            self.assertTrue(interview.is_today)
            self.assertEqual(interview.time_until_interview, 2.3)
            self.assertEqual(interview.days_until_interview, 0)
            self.assertFalse(interview.can_be_completed)
        with self.frozen_at(moment + timezone.timedelta(days=1)):
            self.assertEqual(interview.time_until_interview, 0)
            self.assertTrue(interview.is_overdue)

    def test_scopes(self):
        application = ApplicationFactory()
        upcoming = InterviewFactory(application=application, interview_type=VIDEO,
                                    video_link='https://meet.example.com/abc')
        good = InterviewFactory(application=application, completed=True, decision=YES,
                                interview_type=TECHNICAL,
                                feedback='Good')
        bad = InterviewFactory(application=application, completed=True, decision=STRONG_NO,
                               interview_type=TECHNICAL)
        cancelled = InterviewFactory(application=application, status=CANCELLED,
                                     interview_type=TECHNICAL)
        InterviewFactory()

        interviews = Interview.objects.for_company(application.company_id)
        self.assertEqual(interviews.count(), 4)
        self.assertCountEqual(interviews.upcoming(), [upcoming])
        self.assertCountEqual(interviews.active(), [upcoming])
        self.assertCountEqual(interviews.completed(), [good, bad])
        self.assertCountEqual(interviews.cancelled(), [cancelled])
        self.assertCountEqual(interviews.needs_feedback(), [bad])
        self.assertCountEqual(interviews.positive_decisions(), [good])
        self.assertCountEqual(interviews.negative_decisions(), [bad])
        self.assertCountEqual(interviews.remote(), [upcoming])
        self.assertCountEqual(
            interviews.scheduled_for_date(timezone.localdate(upcoming.scheduled_at)),
            [upcoming, cancelled]
        )
        self.assertCountEqual(
            interviews.for_interviewer(upcoming.interviewer), [upcoming]
        )
