from django.contrib.auth import get_user_model

from hiretrack.common.tests.common import BaseTestCase
from hiretrack.organization.tests.factory import CompanyFactory
from hiretrack.users.constants import INTERVIEWER, RECRUITER
from hiretrack.users.tests.factory import UserFactory

USER = get_user_model()


class TestUser(BaseTestCase):
    def test_create_user(self):
        company = CompanyFactory()
        user = USER.objects.create_user(
            'Jane@EXAMPLE.com', password='secret', first_name='Jane',
            last_name='Doe', company=company
        )
        self.assertEqual(user.email, 'Jane@example.com')
        self.assertTrue(user.check_password('secret'))
        self.assertEqual(user.full_name, 'Jane Doe')
        self.assertEqual(user.role, RECRUITER)
        self.assertEqual(str(user), 'Jane Doe')

    def test_create_user_requires_email(self):
        with self.assertRaises(ValueError):
            USER.objects.create_user('', company=CompanyFactory())

    def test_scopes(self):
        company = CompanyFactory()
        interviewer = UserFactory(company=company, role=INTERVIEWER)
        inactive = UserFactory(company=company, is_active=False)
        UserFactory(role=INTERVIEWER)

        users = USER.objects.for_company(company)
        self.assertCountEqual(users, [interviewer, inactive])
        self.assertCountEqual(users.by_role(INTERVIEWER), [interviewer])
        self.assertCountEqual(users.active(), [interviewer])
