from globtree_core.functions.registry import (
    FUNCTIONS,
    FunctionNotFoundError,
    FunctionResult,
    HostFunction,
    call,
    get_function,
)

__all__ = [
    "FUNCTIONS",
    "FunctionNotFoundError",
    "FunctionResult",
    "HostFunction",
    "call",
    "get_function",
]
