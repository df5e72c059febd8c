"""
Unit Catalog
============

Resolves user tokens (aliases, singular or plural names, any case) to
entries of the fixed unit table.

Usage:
    unit, category = UnitCatalog.resolve("KM")
"""

import logging
from typing import Tuple

from .models import Unit, Category

logger = logging.getLogger(__name__)


class UnitCatalog:
    """
    Lookup over the closed ``Unit`` table.
    """

    @staticmethod
    def resolve(token: str) -> Tuple[Unit, Category]:
        """
        Resolve a unit token or phrase.

        Args:
            token: Unit text as typed, e.g. 'km', 'Feet', 'degrees celsius'

        Returns:
            (unit, category). Unknown tokens give ``(Unit.UNKNOWN, Category.UNKNOWN)``;
            this never raises, callers check for the sentinel.
        """
        name = (token or "").strip()
        for unit in Unit:
            if unit.matches(name):
                return unit, unit.category

        logger.debug(f"No unit matches {token!r}")
        return Unit.UNKNOWN, Category.UNKNOWN
