"""
Service layer.

Each service wraps the store operations for one concern: registering
users, recording exercises and querying exercise logs.  Services raise
the errors from ``core.errors`` and never build HTTP responses.
"""
