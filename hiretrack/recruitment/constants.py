# Application pipeline
(APPLIED, SCREENING, PHONE_INTERVIEW, TECHNICAL_INTERVIEW,
 FINAL_INTERVIEW, OFFER, ACCEPTED, REJECTED, WITHDRAWN) = (
    'applied', 'screening',
    'phone_interview', 'technical_interview',
    'final_interview', 'offer',
    'accepted', 'rejected', 'withdrawn'
)

APPLICATION_STATUS_CHOICES = [
    (APPLIED, 'Applied'),
    (SCREENING, 'Screening'),
    (PHONE_INTERVIEW, 'Phone Interview'),
    (TECHNICAL_INTERVIEW, 'Technical Interview'),
    (FINAL_INTERVIEW, 'Final Interview'),
    (OFFER, 'Offer'),
    (ACCEPTED, 'Accepted'),
    (REJECTED, 'Rejected'),
    (WITHDRAWN, 'Withdrawn'),
]

# stages reachable through `advance_to`
PIPELINE_STAGES = (
    SCREENING, PHONE_INTERVIEW, TECHNICAL_INTERVIEW, FINAL_INTERVIEW
)
INTERVIEW_STAGES = (PHONE_INTERVIEW, TECHNICAL_INTERVIEW, FINAL_INTERVIEW)
NEEDS_ACTION_STAGES = (APPLIED, SCREENING)
CLOSED_APPLICATION_STATUSES = (ACCEPTED, REJECTED, WITHDRAWN)
ACTIVE_APPLICATION_STATUSES = tuple(
    status for status, _ in APPLICATION_STATUS_CHOICES
    if status not in CLOSED_APPLICATION_STATUSES
)

(WEBSITE, LINKEDIN, INDEED, GLASSDOOR, REFERRAL, RECRUITER,
 CAREER_FAIR, UNIVERSITY, DIRECT, OTHER) = (
    'website', 'linkedin', 'indeed', 'glassdoor', 'referral', 'recruiter',
    'career_fair', 'university', 'direct', 'other'
)

APPLICATION_SOURCE_CHOICES = [
    (WEBSITE, 'Website'),
    (LINKEDIN, 'LinkedIn'),
    (INDEED, 'Indeed'),
    (GLASSDOOR, 'Glassdoor'),
    (REFERRAL, 'Referral'),
    (RECRUITER, 'Recruiter'),
    (CAREER_FAIR, 'Career Fair'),
    (UNIVERSITY, 'University'),
    (DIRECT, 'Direct'),
    (OTHER, 'Other'),
]

# Interviews
PHONE, VIDEO, ONSITE, TECHNICAL, BEHAVIORAL, PANEL = (
    'phone', 'video', 'onsite', 'technical', 'behavioral', 'panel'
)

INTERVIEW_TYPE_CHOICES = [
    (PHONE, 'Phone Interview'),
    (VIDEO, 'Video Interview'),
    (ONSITE, 'On-site Interview'),
    (TECHNICAL, 'Technical Interview'),
    (BEHAVIORAL, 'Behavioral Interview'),
    (PANEL, 'Panel Interview'),
]

REMOTE_INTERVIEW_TYPES = (PHONE, VIDEO)

DEFAULT_INTERVIEW_DURATIONS = {
    PHONE: 30,
    VIDEO: 45,
    TECHNICAL: 90,
    PANEL: 90,
    BEHAVIORAL: 60,
    ONSITE: 60,
}

MIN_INTERVIEW_DURATION, MAX_INTERVIEW_DURATION = 1, 480

SCHEDULED, CONFIRMED, COMPLETED, CANCELLED, NO_SHOW = (
    'scheduled', 'confirmed', 'completed', 'cancelled', 'no_show'
)

INTERVIEW_STATUS_CHOICES = [
    (SCHEDULED, 'Scheduled'),
    (CONFIRMED, 'Confirmed'),
    (COMPLETED, 'Completed'),
    (CANCELLED, 'Cancelled'),
    (NO_SHOW, 'No Show'),
]

OPEN_INTERVIEW_STATUSES = (SCHEDULED, CONFIRMED)
CLOSED_INTERVIEW_STATUSES = (COMPLETED, CANCELLED, NO_SHOW)

STRONG_YES, YES, MAYBE, NO, STRONG_NO = (
    'strong_yes', 'yes', 'maybe', 'no', 'strong_no'
)

DECISION_CHOICES = [
    (STRONG_YES, 'Strong Yes'),
    (YES, 'Yes'),
    (MAYBE, 'Maybe'),
    (NO, 'No'),
    (STRONG_NO, 'Strong No'),
]

POSITIVE_DECISIONS = (STRONG_YES, YES)
NEGATIVE_DECISIONS = (NO, STRONG_NO)

# Jobs
DRAFT, PUBLISHED, CLOSED = 'draft', 'published', 'closed'
JOB_STATUS_CHOICES = (
    (DRAFT, 'Draft'),
    (PUBLISHED, 'Published'),
    (CLOSED, 'Closed'),
)
