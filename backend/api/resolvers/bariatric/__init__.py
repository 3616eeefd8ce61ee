"""Bariatric GraphQL resolvers.

This module exports mutations and queries for the bariatric domain.
"""

from api.resolvers.bariatric.mutations import BariatricMutations
from api.resolvers.bariatric.queries import BariatricQueries

__all__ = [
    "BariatricMutations",
    "BariatricQueries",
]
