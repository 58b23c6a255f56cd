"""
Grade Assist: Interactive batch grading of student submissions

Locates each student's archive from a spreadsheet roster, opens every
deliverable in the right viewer, compiler or patch workflow, and records the
scores typed in by the human grader to a resumable output log.
"""

__version__ = "0.1.0"
