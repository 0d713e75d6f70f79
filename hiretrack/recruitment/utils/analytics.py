"""
Read-only hiring metrics of a company.

Rates are percentages rounded half up to one decimal place, and are 0 when
there is nothing to divide by.
"""
from django.db.models import Avg, Count

from hiretrack.core.utils.common import round_half_up
from hiretrack.recruitment.constants import (
    COMPLETED, CANCELLED, NO_SHOW, ACCEPTED
)
from hiretrack.recruitment.models import Application, Interview


def percentage(part, total):
    if not total:
        return 0
    return round_half_up(part * 100 / total)


class AnalyticsAggregator:
    """
    :param company_id: company whose applications and interviews are counted
    :param applications: optional narrower queryset of applications
    :param interviews: optional narrower queryset of interviews
    """

    def __init__(self, company_id, applications=None, interviews=None):
        self.company_id = company_id
        self.applications = (
            applications if applications is not None
            else Application.objects.all()
        ).for_company(company_id)
        self.interviews = (
            interviews if interviews is not None
            else Interview.objects.all()
        ).for_company(company_id)

    # Interviews

    @property
    def completed_interviews(self):
        return self.interviews.filter(status=COMPLETED)

    def completion_rate(self):
        return percentage(
            self.completed_interviews.count(), self.interviews.count()
        )

    def no_show_rate(self):
        attended = self.interviews.exclude(status=CANCELLED).count()
        return percentage(self.interviews.filter(status=NO_SHOW).count(), attended)

    def average_rating(self):
        average = self.completed_interviews.filter(
            rating__isnull=False
        ).aggregate(average=Avg('rating'))['average']
        return round_half_up(average) if average is not None else 0

    def average_duration(self):
        average = self.interviews.aggregate(
            average=Avg('duration_minutes')
        )['average']
        return int(round_half_up(average, 0)) if average is not None else 0

    def decision_breakdown(self):
        return self._breakdown(
            self.completed_interviews.exclude(decision=''), 'decision'
        )

    def type_breakdown(self):
        return self._breakdown(self.interviews, 'interview_type')

    # Applications

    def conversion_rate(self, from_status, to_status):
        return percentage(
            self.applications.filter(status=to_status).count(),
            self.applications.filter(status=from_status).count()
        )

    def average_time_to_hire(self):
        days = [
            application.time_to_hire
            for application in self.applications.filter(status=ACCEPTED)
        ]
        if not days:
            return 0
        return round_half_up(sum(days) / len(days))

    def pipeline_breakdown(self):
        return self._breakdown(self.applications, 'status')

    def source_breakdown(self):
        return self._breakdown(self.applications.exclude(source=''), 'source')

    def summary(self):
        return {
            'total_applications': self.applications.count(),
            'total_interviews': self.interviews.count(),
            'completion_rate': self.completion_rate(),
            'no_show_rate': self.no_show_rate(),
            'average_rating': self.average_rating(),
            'average_duration': self.average_duration(),
            'average_time_to_hire': self.average_time_to_hire(),
            'decision_breakdown': self.decision_breakdown(),
            'type_breakdown': self.type_breakdown(),
            'pipeline_breakdown': self.pipeline_breakdown(),
            'source_breakdown': self.source_breakdown(),
        }

    @staticmethod
    def _breakdown(queryset, field):
        return {
            row[field]: row['count']
            for row in queryset.order_by().values(field).annotate(
                count=Count('id')
            )
        }
