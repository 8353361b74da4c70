"""
staff_skills.api

API package for the Staff Skills service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: HTTP translation + delegation to PersonService.
