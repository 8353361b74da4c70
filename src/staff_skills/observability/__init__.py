"""
staff_skills.observability

Structured logging configuration and request context propagation.
"""
