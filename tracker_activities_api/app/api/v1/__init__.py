"""
Version 1 of the API.

This subpackage bundles the endpoints for subjects, students,
activities and qualifications.
"""
