import datetime

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase
from django.utils import timezone

from hiretrack.core.exceptions import TenantMismatchError
from hiretrack.core.utils import nested_getattr
from hiretrack.core.utils.common import (
    append_note, round_half_up, days_between
)
from hiretrack.core.validators import validate_rating, validate_http_url


class TestCommonUtils(SimpleTestCase):
    def test_append_note(self):
        self.assertEqual(append_note('', 'First'), 'First')
        self.assertEqual(append_note('First', 'Second'), 'First\n\nSecond')
        self.assertEqual(append_note('First', None), 'First')
        self.assertEqual(append_note('First', ''), 'First')

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.25), 2.3)
        self.assertEqual(round_half_up(40), 40.0)
        self.assertEqual(round_half_up(66.666), 66.7)
        self.assertEqual(round_half_up(44.5, 0), 45.0)

    def test_days_between(self):
        start = timezone.make_aware(datetime.datetime(2024, 1, 1, 23, 0))
        end = timezone.make_aware(datetime.datetime(2024, 1, 31, 1, 0))
        self.assertEqual(days_between(start, end), 30)
        self.assertEqual(
            days_between(datetime.date(2024, 1, 1), datetime.date(2024, 1, 2)),
            1
        )

    def test_nested_getattr(self):
        error = TenantMismatchError({'interviewer': 'wrong company'})
        self.assertEqual(nested_getattr(error, 'fields'), ['interviewer'])
        self.assertIsNone(nested_getattr(error, 'missing.attribute'))


class TestValidators(SimpleTestCase):
    def test_rating_bounds(self):
        for rating in (1, 3, 5):
            validate_rating(rating)
        for rating in (0, 6):
            with self.assertRaises(ValidationError):
                validate_rating(rating)

    def test_http_url(self):
        validate_http_url('https://zoom.us/j/123')
        for url in ('ftp://files.example.com', 'zoom us'):
            with self.assertRaises(ValidationError):
                validate_http_url(url)


class TestTenantMismatchError(SimpleTestCase):
    def test_is_not_a_validation_error(self):
        error = TenantMismatchError({'job': 'outside', 'candidate': ['outside']})
        self.assertNotIsInstance(error, ValidationError)
        self.assertEqual(error.fields, ['candidate', 'job'])
        self.assertEqual(error.message_dict['job'], ['outside'])
