RATING_RANGE_MESSAGE = "must be between 1 and 5"
SALARY_NEGATIVE_MESSAGE = "must be a positive amount"
DURATION_RANGE_MESSAGE = "must be between 1 and 480 minutes"
INVALID_URL_MESSAGE = "must be a valid URL"

DUPLICATE_APPLICATION_MESSAGE = "has already applied to this job"
APPLIED_AT_IN_FUTURE_MESSAGE = "cannot be in the future"

REJECTED_AT_REQUIRED_MESSAGE = "must be present when status is rejected"
REJECTED_AT_NOT_ALLOWED_MESSAGE = "must be blank when status is not rejected"
COMPLETED_AT_REQUIRED_MESSAGE = "must be present when status is completed"
COMPLETED_AT_NOT_ALLOWED_MESSAGE = "must be blank when status is not completed"
DECISION_REQUIRES_COMPLETION_MESSAGE = (
    "can only be set when interview is completed"
)
LOCATION_REQUIRED_MESSAGE = "is required for onsite interviews"
VIDEO_LINK_REQUIRED_MESSAGE = "is required for video interviews"
SCHEDULED_AT_IN_PAST_MESSAGE = "must be in the future"

TERMINAL_APPLICATION_MESSAGE = (
    "cannot change from {status}, the application is closed"
)
INVALID_STAGE_MESSAGE = "{stage} is not a pipeline stage"

SAME_COMPANY_AS_APPLICATION_MESSAGE = (
    "must belong to the same company as the application"
)
OUTSIDE_TENANT_MESSAGE = "does not belong to the requested company"
