from django.contrib.auth.base_user import AbstractBaseUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from hiretrack.common.models import TimeStampedModel
from hiretrack.organization.models import Company
from .constants import ROLE_CHOICES, RECRUITER
from .managers import UserManager


class User(AbstractBaseUser, TimeStampedModel):
    email = models.EmailField(
        _('user email'), max_length=255, unique=True,
    )
    first_name = models.CharField(_('First Name'), max_length=150)
    last_name = models.CharField(_('Last Name'), max_length=150, blank=True)
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name='users'
    )
    role = models.CharField(
        choices=ROLE_CHOICES, default=RECRUITER, max_length=20, db_index=True
    )
    is_active = models.BooleanField(default=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    def __str__(self):
        return self.full_name or self.email

    @property
    def full_name(self):
        return ' '.join(filter(None, [self.first_name, self.last_name]))
