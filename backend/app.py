from __future__ import annotations

# Standard library
import datetime
from contextlib import asynccontextmanager
from typing import Final, Any

# Third-party
import strawberry
import structlog
from dotenv import load_dotenv
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

load_dotenv()

# Local application imports
from api.context import GraphQLContext, create_context  # noqa: E402
from api.resolvers.bariatric import BariatricMutations, BariatricQueries  # noqa: E402
from api.schema import create_schema  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_app_version,
    get_default_meals_per_day,
    get_default_phase,
    get_repository_backend,
)
from infrastructure.logging_config import configure_logging  # noqa: E402
from infrastructure.persistence.patient_profile_factory import (  # noqa: E402
    get_patient_profile_repository,
)
from infrastructure.persistence.weight_entry_factory import (  # noqa: E402
    get_weight_entry_repository,
)

configure_logging()
logger = structlog.get_logger("startup")

# Version from env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = get_app_version()


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        return datetime.datetime.now(datetime.timezone.utc).isoformat().replace("+00:00", "Z")

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Bariatric clinical calculators")  # type: ignore[misc]
    def bariatric(self) -> BariatricQueries:
        """Bariatric clinical queries.

        Example:
            query {
              bariatric {
                bmi(weightKg: 120, heightCm: 170) { bmi category }
                clinicalSnapshot(userId: "user123") { proteinTarget { dailyGrams } }
              }
            }
        """
        return BariatricQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Bariatric patient mutations")  # type: ignore[misc]
    def bariatric(self) -> BariatricMutations:
        """Bariatric mutations (CQRS commands).

        Example:
            mutation {
              bariatric {
                savePatientProfile(input: {userId: "user123"}) { userId }
                logWeight(input: {userId: "user123", weightKg: 104.2}) { profileUpdated }
              }
            }
        """
        return BariatricMutations()


schema = create_schema()

# Explicit export per mypy/tests
__all__: list[str] = []


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:  # pragma: no cover
    """Application lifecycle: log configuration on startup and shutdown."""
    logger.info(
        "startup.config",
        version=APP_VERSION,
        repository_backend=get_repository_backend(),
        default_phase=get_default_phase().value,
        default_meals_per_day=get_default_meals_per_day(),
    )
    # Fail fast on an unsupported backend
    get_patient_profile_repository()
    get_weight_entry_repository()

    logger.info("lifespan.ready", status="serving")
    yield
    logger.info("lifespan.shutdown", status="cleanup")


app = FastAPI(
    title="Bariatric Clinical Calculator",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context() -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Repositories are the process-wide singletons selected by
    REPOSITORY_BACKEND.
    """
    return create_context(
        profile_repository=get_patient_profile_repository(),
        weight_entry_repository=get_weight_entry_repository(),
        default_phase=get_default_phase(),
        default_meals_per_day=get_default_meals_per_day(),
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
