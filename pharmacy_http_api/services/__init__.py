"""
Service layer for the Pharmacy HTTP API.

Services hold the business rules and sit between the routers and the
repositories.
"""

from .auth_service import AuthService
from .billing_service import BillingService
from .medicines_service import MedicinesService

__all__ = ["AuthService", "BillingService", "MedicinesService"]
