from django.contrib.auth.base_user import BaseUserManager
from django.db.models import QuerySet


class UserQueryset(QuerySet):
    def for_company(self, company):
        return self.filter(company=company)

    def by_role(self, role):
        return self.filter(role=role)

    def active(self):
        return self.filter(is_active=True)


class UserManager(BaseUserManager.from_queryset(UserQueryset)):
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The given email must be set')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        return self._create_user(email, password, **extra_fields)
