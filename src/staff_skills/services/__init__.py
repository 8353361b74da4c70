"""
staff_skills.services

Service layer: the Person aggregate service, its validation step and the
entity/DTO mapping functions.
"""
