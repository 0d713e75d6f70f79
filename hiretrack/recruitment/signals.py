"""
Extension points fired after a pipeline or interview transition is persisted.

No receiver is connected here, interview outcomes never move an application on
their own.
"""
from django.dispatch import Signal

# kwargs: application, from_status, to_status, changed_by
application_stage_changed = Signal()

# kwargs: interview, from_status, to_status
interview_status_changed = Signal()
