"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any, Optional

import strawberry
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from eventhub.core.config import get_settings
from eventhub.core.errors import DomainError
from eventhub.core.logging import get_logger

from .context import get_context
from .extensions import OperationMetricsExtension
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class EventHubSchema(strawberry.Schema):
    """Schema that logs resolver errors through structlog.

    Domain errors are expected outcomes (bad input, missing entity, rejected
    login) and log at warning level; anything else is a bug and logs with its
    traceback.
    """

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, DomainError):
                logger.warning(
                    "graphql_domain_error",
                    code=original.code.value,
                    message=original.message,
                    path=error.path,
                )
            elif original is None:
                logger.info("graphql_request_error", message=error.message)
            else:
                logger.error(
                    "graphql_resolver_error",
                    message=error.message,
                    path=error.path,
                    exc_info=original,
                )


# Built once at import time and never mutated afterwards
schema = EventHubSchema(
    query=Query,
    mutation=Mutation,
    extensions=[OperationMetricsExtension],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    errors = gql_validate_schema(schema._schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error("graphql_schema_invalid", errors=error_messages)
        raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

    logger.info("graphql_schema_valid")


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    settings = get_settings()
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
