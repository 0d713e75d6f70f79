import contextlib
from unittest import mock

from django.db import transaction
from django.test import TestCase


class BaseTestCase(TestCase):

    @contextlib.contextmanager
    def atomicSubTest(self, **kwargs):
        """
        :keyword kwargs: kwargs to pass in subTest
        :return: A ContextManager which will rollback to initial save point upon exit

        Run all your cases inside a test case. Test execution will not be interrupted when single
        test fails, it will run all test cases and show result at last

        Usage
        ---
        .. code-block:: python

            for case in cases:
                with self.atomicSubTest():
                    run_test(case)
        """
        savepoint = transaction.savepoint()

        try:
            with self.subTest(**kwargs):
                yield savepoint
        finally:
            transaction.savepoint_rollback(savepoint)

    @staticmethod
    def frozen_at(moment):
        """Pretend the current time is `moment` inside the block."""
        return mock.patch('django.utils.timezone.now', return_value=moment)

    def assertFieldErrors(self, error, *fields):
        self.assertEqual(sorted(error.message_dict), sorted(fields))
