"""Domain layer for bariatric clinical calculations.

Business rules live here, decoupled from the GraphQL presentation and
from infrastructure.
"""
