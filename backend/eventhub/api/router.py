"""
Central API router: the GraphQL endpoint plus the metrics scrape endpoint.
"""

from fastapi import APIRouter

from eventhub.core.metrics import metrics_endpoint
from eventhub.graphql.schema import create_graphql_router

api_router = APIRouter()
api_router.include_router(create_graphql_router())


@api_router.get("/metrics", tags=["Observability"], include_in_schema=False)
async def metrics():
    return metrics_endpoint()
