"""
Service layer abstraction.

Services encapsulate business logic and delegate persistence to the
record store, so API handlers never touch the data file directly.
"""

from .company_service import CompanyService

__all__ = ["CompanyService"]
