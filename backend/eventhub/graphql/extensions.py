"""
Strawberry schema extensions.
"""

import time

from strawberry.extensions import SchemaExtension

from eventhub.core.metrics import record_graphql_operation


class OperationMetricsExtension(SchemaExtension):
    """Counts executed operations by name and outcome and times them."""

    def on_execute(self):
        start = time.perf_counter()
        yield
        result = self.execution_context.result
        record_graphql_operation(
            self.execution_context.operation_name or "anonymous",
            succeeded=not (result is not None and result.errors),
            duration_seconds=time.perf_counter() - start,
        )
