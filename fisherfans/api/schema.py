"""
GraphQL schema and router.

Business errors reach the client with their message and
``extensions = {"code": "FF-xxx", "error": "<Name>"}``. Anything else is
logged with its traceback and replaced by a generic message.
"""

import logging
from typing import Optional

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..errors import BusinessError
from .context import get_context
from .mutations import Mutation
from .queries import Query

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def is_unexpected_error(error: GraphQLError) -> bool:
    """Resolver exceptions that are neither business rule violations nor request errors"""
    original = error.original_error
    return original is not None and not isinstance(original, (BusinessError, GraphQLError))


class MaskUnexpectedErrors(MaskErrors):
    def __init__(self, *, execution_context: Optional[ExecutionContext] = None):
        super().__init__(should_mask_error=is_unexpected_error, error_message=INTERNAL_ERROR_MESSAGE)
        if execution_context is not None:
            self.execution_context = execution_context


class FisherFansSchema(strawberry.Schema):
    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            if isinstance(error.original_error, BusinessError):
                logger.info(
                    f"🚫 {error.original_error.code} {error.original_error.error}: {error.message}"
                )
            elif is_unexpected_error(error):
                logger.error(
                    f"❌ Unhandled error in {error.path}: {error.original_error}",
                    exc_info=error.original_error,
                )
            else:
                logger.debug(f"GraphQL request error: {error.message}")


schema = FisherFansSchema(
    query=Query,
    mutation=Mutation,
    extensions=[MaskUnexpectedErrors],
)

graphql_app = GraphQLRouter(schema, context_getter=get_context)
