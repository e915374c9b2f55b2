"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (subjects, students, activities,
qualifications) has a schema module, a service class issuing
parameterized SQL, and a router defined in ``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
