from django.apps import AppConfig


class RecruitmentConfig(AppConfig):
    name = 'hiretrack.recruitment'

    def ready(self):
        from . import signals
