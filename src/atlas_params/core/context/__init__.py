from .store import (
    FLOW_CONTEXT,
    NODE_CONTEXT,
    ContextTypeError,
    ExecutionContextStore,
    context_key,
)

__all__ = [
    "FLOW_CONTEXT",
    "NODE_CONTEXT",
    "ContextTypeError",
    "ExecutionContextStore",
    "context_key",
]
