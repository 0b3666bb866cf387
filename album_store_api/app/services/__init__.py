"""
Service layer abstraction.

Services hold the business rules and translate storage failures into
domain errors, keeping route handlers thin.
"""
