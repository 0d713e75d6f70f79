ADMIN, HIRING_MANAGER, RECRUITER, INTERVIEWER, COORDINATOR = (
    'admin', 'hiring_manager', 'recruiter', 'interviewer', 'coordinator'
)
ROLE_CHOICES = (
    (ADMIN, 'Admin'),
    (HIRING_MANAGER, 'Hiring Manager'),
    (RECRUITER, 'Recruiter'),
    (INTERVIEWER, 'Interviewer'),
    (COORDINATOR, 'Coordinator'),
)
