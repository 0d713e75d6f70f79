"""@hiretrack_docs"""
from django.core.exceptions import ValidationError
from django.core.validators import URLValidator
from django.utils.deconstruct import deconstructible
from django.utils.translation import gettext_lazy as _

from .validation_messages import (
    RATING_RANGE_MESSAGE, INVALID_URL_MESSAGE
)


@deconstructible
class MinMaxValueValidator:
    message = _(
        'Ensure this value is between {min_value} and {max_value} (it is {show_value}).')
    code = 'limit_value'

    def __init__(self, min_value, max_value, message=None):
        self.min_value = min_value
        self.max_value = max_value

        if message:
            self.message = message

    def __call__(self, value):
        params = {'min_value': self.min_value, 'max_value': self.max_value,
                  'show_value': value, 'value': value}
        if self.compare(value, self.min_value, self.max_value):
            raise ValidationError(self.message.format(**params), code=self.code)

    @staticmethod
    def compare(value, min_value, max_value):
        return not (min_value <= value <= max_value)

    def __eq__(self, other):
        return (
            isinstance(other, self.__class__) and
            self.min_value == other.min_value and
            self.max_value == other.max_value and
            self.message == other.message
        )


validate_rating = MinMaxValueValidator(1, 5, message=RATING_RANGE_MESSAGE)

validate_http_url = URLValidator(
    schemes=['http', 'https'], message=INVALID_URL_MESSAGE
)
