"""
Application package initializer.

The API is split into ``core`` (configuration, logging, errors and the
store connection), ``schemas`` (pydantic payloads), ``services``
(operations on users, exercises and logs) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
