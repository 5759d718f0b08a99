"""
Pydantic schema definitions for API payloads.

Request schemas validate incoming bodies and query strings; response
schemas fix the JSON field names (``_id`` rather than ``id``) and their
order.
"""
