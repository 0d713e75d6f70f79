import factory
from factory.django import DjangoModelFactory
from django.utils import timezone

from hiretrack.organization.tests.factory import CompanyFactory
from hiretrack.recruitment.constants import (
    PUBLISHED, APPLIED, PHONE, SCHEDULED, COMPLETED, REJECTED, WEBSITE
)
from hiretrack.recruitment.models import Job, Candidate, Application, Interview
from hiretrack.users.constants import INTERVIEWER
from hiretrack.users.tests.factory import UserFactory


class JobFactory(DjangoModelFactory):
    class Meta:
        model = Job

    company = factory.SubFactory(CompanyFactory)
    title = factory.Faker('job')
    status = PUBLISHED


class CandidateFactory(DjangoModelFactory):
    class Meta:
        model = Candidate

    company = factory.SubFactory(CompanyFactory)
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    email = factory.Faker('email')


class ApplicationFactory(DjangoModelFactory):
    class Meta:
        model = Application

    company = factory.SubFactory(CompanyFactory)
    job = factory.SubFactory(JobFactory, company=factory.SelfAttribute('..company'))
    candidate = factory.SubFactory(
        CandidateFactory, company=factory.SelfAttribute('..company')
    )
    status = APPLIED
    source = WEBSITE
    applied_at = factory.LazyFunction(lambda: timezone.now() - timezone.timedelta(days=7))

    class Params:
        rejected = factory.Trait(
            status=REJECTED,
            rejected_at=factory.LazyFunction(lambda: timezone.now())
        )


class InterviewFactory(DjangoModelFactory):
    class Meta:
        model = Interview

    application = factory.SubFactory(ApplicationFactory)
    interviewer = factory.SubFactory(
        UserFactory,
        company=factory.SelfAttribute('..application.company'),
        role=INTERVIEWER
    )
    interview_type = PHONE
    status = SCHEDULED
    scheduled_at = factory.LazyFunction(lambda: timezone.now() + timezone.timedelta(days=1))
    duration_minutes = 30

    class Params:
        completed = factory.Trait(
            status=COMPLETED,
            scheduled_at=factory.LazyFunction(
                lambda: timezone.now() - timezone.timedelta(days=1)
            ),
            completed_at=factory.LazyFunction(lambda: timezone.now())
        )
