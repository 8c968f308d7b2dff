# pharmacy_http_api/repositories/__init__.py
"""
Repository layer public exports.

    from pharmacy_http_api.repositories import MedicinesRepository
"""

from .medicines import MedicinesRepository

__all__ = ["MedicinesRepository"]
