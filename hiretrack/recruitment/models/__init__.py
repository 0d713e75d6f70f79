from .job import Job
from .candidate import Candidate
from .application import Application
from .interview import Interview
