"""
staff_skills

Top-level package for the Staff Skills service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
