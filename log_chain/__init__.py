from log_chain.chain import LogChain, build_default_chain
from log_chain.handlers import (
    ErrorHandler,
    FatalErrorHandler,
    LogHandler,
    UnknownHandler,
    WarningHandler,
)
from log_chain.messages import LogMessage, LogType
from log_chain.outcomes import (
    ConditionRaised,
    DispatchResult,
    Fail,
    FatalCondition,
    Forward,
    Handled,
    LogChainError,
    Ok,
    UnknownMessage,
    raise_for,
)

__all__ = [
    "LogChain",
    "build_default_chain",
    "LogHandler",
    "FatalErrorHandler",
    "ErrorHandler",
    "WarningHandler",
    "UnknownHandler",
    "LogMessage",
    "LogType",
    "Ok",
    "Handled",
    "Forward",
    "Fail",
    "FatalCondition",
    "UnknownMessage",
    "DispatchResult",
    "LogChainError",
    "ConditionRaised",
    "raise_for",
]
