# JobTracker - Job Application Tracker
"""
JobTracker - Track job applications and analyze job descriptions.

Record postings you've applied to, move them through the hiring
pipeline, and get an AI summary of any job description.
"""

__version__ = "0.1.0"
__author__ = "JobTracker"
__description__ = "Job application tracker with AI job description analysis"
