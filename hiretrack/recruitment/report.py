from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from hiretrack.core.utils.common import get_today
from hiretrack.organization.models import Company
from hiretrack.recruitment.constants import (
    APPLICATION_STATUS_CHOICES, INTERVIEW_TYPE_CHOICES, DECISION_CHOICES,
    APPLICATION_SOURCE_CHOICES
)
from hiretrack.recruitment.utils.analytics import AnalyticsAggregator


class ReportMixin:
    ws = None
    FONTS = {
        '12B': Font(size=12, bold=True),
        '10B': Font(size=10, bold=True),
        '10N': Font(size=10, bold=False),
    }

    ALIGNMENT = {
        'center': Alignment(horizontal='center', vertical='center'),
        'left': Alignment(horizontal='left', vertical='center'),
    }

    def extend_cell(self, cell, right=0, down=0):
        self.ws.merge_cells(
            f"{cell.column_letter}{cell.row}:{get_column_letter(cell.column+right)}{cell.row+down}"
        )

    @classmethod
    def add_font(cls, cells, font_key):
        if not isinstance(cells, list):
            cells = [cells]
        for cell in cells:
            setattr(cell, 'font', cls.FONTS.get(font_key, Font()))

    @classmethod
    def align(cls, cells, align):
        if not isinstance(cells, list):
            cells = [cells]
        for cell in cells:
            setattr(cell, 'alignment', cls.ALIGNMENT.get(align, Alignment()))

    @classmethod
    def add_border(cls, cells, borders, border_style='thin'):
        side = Side(border_style=border_style)
        border = Border(**{
            edge: side for edge in
            set(borders).intersection({'right', 'left', 'top', 'bottom'})
        })
        if not isinstance(cells, list):
            cells = [cells]
        for cell in cells:
            setattr(cell, 'border', border)

    def set_width(self, col, width):
        self.ws.column_dimensions[get_column_letter(col)].width = width


SUMMARY_LABELS = (
    ('total_applications', 'Total Applications'),
    ('total_interviews', 'Total Interviews'),
    ('completion_rate', 'Completion Rate (%)'),
    ('no_show_rate', 'No Show Rate (%)'),
    ('average_rating', 'Average Rating'),
    ('average_duration', 'Average Duration (min)'),
    ('average_time_to_hire', 'Average Time to Hire (days)'),
)


class PipelineReport(ReportMixin):
    """
    Excel workbook with the hiring metrics of a company.

    The first sheet holds the summary, the following sheets hold one
    breakdown each with every possible value listed, zero counts included.

    Usage
    ---
    .. code-block:: python

        PipelineReport(company_id).save('pipeline.xlsx')
    """
    BREAKDOWNS = (
        ('Pipeline', 'Status', 'pipeline_breakdown', APPLICATION_STATUS_CHOICES),
        ('Sources', 'Source', 'source_breakdown', APPLICATION_SOURCE_CHOICES),
        ('Interview Types', 'Type', 'type_breakdown', INTERVIEW_TYPE_CHOICES),
        ('Decisions', 'Decision', 'decision_breakdown', DECISION_CHOICES),
    )

    def __init__(self, company_id, aggregator=None):
        self.company = Company.objects.get(id=company_id)
        self.aggregator = aggregator or AnalyticsAggregator(company_id)
        self.summary = self.aggregator.summary()
        self.wb = Workbook()
        self.ws = self.wb.active
        self.ws.title = 'Summary'
        self.create_summary()
        for title, label, key, choices in self.BREAKDOWNS:
            self.create_breakdown(title, label, self.summary[key], choices)

    def create_title(self, text):
        title = self.ws.cell(row=1, column=1, value=text)
        self.extend_cell(title, right=1)
        self.add_font(title, '12B')
        self.align(title, 'center')
        self.set_width(1, 32)
        self.set_width(2, 14)

    def create_header(self, row, *labels):
        cells = [
            self.ws.cell(row=row, column=column, value=label)
            for column, label in enumerate(labels, start=1)
        ]
        self.add_font(cells, '10B')
        self.add_border(cells, ['bottom'])

    def create_summary(self):
        self.create_title(
            f"{self.company.name} hiring pipeline as of {get_today()}"
        )
        self.create_header(3, 'Metric', 'Value')
        for row, (key, label) in enumerate(SUMMARY_LABELS, start=4):
            self.ws.cell(row=row, column=1, value=label)
            self.ws.cell(row=row, column=2, value=self.summary[key])

    def create_breakdown(self, title, label, counts, choices):
        self.ws = self.wb.create_sheet(title=title)
        self.create_title(title)
        self.create_header(3, label, 'Count')
        for row, (value, display) in enumerate(choices, start=4):
            name = self.ws.cell(row=row, column=1, value=display)
            self.add_font(name, '10N')
            self.align(name, 'left')
            self.ws.cell(row=row, column=2, value=counts.get(value, 0))

    def save(self, filename):
        """`filename` is a path or a writable binary stream."""
        self.wb.save(filename)
        return filename
