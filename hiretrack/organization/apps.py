from django.apps import AppConfig


class OrganizationConfig(AppConfig):
    name = 'hiretrack.organization'
