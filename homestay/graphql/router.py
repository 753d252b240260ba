from strawberry.fastapi import GraphQLRouter

from homestay.graphql.context import get_context
from homestay.graphql.schema import schema


graphql_router = GraphQLRouter(schema, context_getter=get_context)
