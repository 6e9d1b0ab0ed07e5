from typing import Iterable, Iterator

from aws_lambda_powertools import Logger

from log_chain.config import SERVICE_NAME, DEFAULT_ERROR_LOG
from log_chain.handlers import (
    ErrorHandler,
    FatalErrorHandler,
    LogHandler,
    UnknownHandler,
    WarningHandler,
)
from log_chain.messages import LogMessage
from log_chain.outcomes import DispatchResult, Fail, Forward, Handled, Ok


logger = Logger(service=SERVICE_NAME, child=True)


class LogChain:
    """
    Ordered, immutable sequence of handlers.

    The first handler that does not forward a message decides the
    result; the ones after it never see the message. A message nobody
    claims is dropped and reported as ``Ok(None)``.
    """

    def __init__(self, handlers: Iterable[LogHandler] = ()):
        handlers = tuple(handlers)
        for handler in handlers:
            if not isinstance(handler, LogHandler):
                raise TypeError(f"Chain members must be LogHandler instances, got {handler!r}")
        self._handlers = handlers

    @property
    def handlers(self) -> tuple[LogHandler, ...]:
        return self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[LogHandler]:
        return iter(self._handlers)

    def __repr__(self) -> str:
        return f"LogChain({' -> '.join(h.name for h in self._handlers)})"

    def then(self, handler: LogHandler) -> "LogChain":
        return LogChain((*self._handlers, handler))

    def handle(self, message: LogMessage) -> DispatchResult:
        for handler in self._handlers:
            match handler.handle(message):
                case Forward():
                    continue
                case Handled(name):
                    logger.info(f"{message.category.name} handled by {name}")
                    return Ok(name)
                case Fail(condition):
                    logger.info(f"{message.category.name} failed in {handler.name}: {condition.description}")
                    return condition
                case other:
                    raise TypeError(f"{handler.name} returned {other!r}, expected an Outcome")

        logger.debug(f"No handler for {message.category.name}, message dropped")
        return Ok()


def build_default_chain(error_log_path=DEFAULT_ERROR_LOG) -> LogChain:
    return LogChain([
        FatalErrorHandler(),
        ErrorHandler(error_log_path),
        WarningHandler(),
        UnknownHandler(),
    ])
