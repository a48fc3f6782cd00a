"""
Domain layer - Business entities, models, schemas, enums and interfaces.
"""

from domain import enums, models, schemas, interfaces

__all__ = ["enums", "models", "schemas", "interfaces"]
