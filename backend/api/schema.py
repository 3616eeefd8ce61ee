"""GraphQL schema factory.

The Query and Mutation roots are defined in app.py; this module only
assembles them so tests can build a schema without starting the server.

Usage:
    from api.schema import create_schema
    schema = create_schema()
"""

import strawberry


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with the bariatric resolvers.

    Returns:
        Configured Strawberry Schema instance
    """
    # Import here to avoid circular dependency
    from app import Mutation, Query

    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
    )
