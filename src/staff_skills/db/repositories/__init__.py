"""
staff_skills.db.repositories

Repository package.
"""

# Repositories are intentionally thin; the transaction boundary belongs to services.
