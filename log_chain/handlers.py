import sys
from abc import ABC, abstractmethod
from pathlib import Path

from aws_lambda_powertools import Logger

from log_chain.config import SERVICE_NAME
from log_chain.messages import LogMessage, LogType
from log_chain.outcomes import (
    Fail,
    FatalCondition,
    Forward,
    Handled,
    Outcome,
    UnknownMessage,
)


logger = Logger(service=SERVICE_NAME, child=True)


class LogHandler(ABC):
    """
    A single link of the chain. Messages of another category are
    forwarded untouched; matching ones go to ``process``.
    """

    category: LogType

    @property
    def name(self) -> str:
        return type(self).__name__

    def handle(self, message: LogMessage) -> Outcome:
        if message.category is not self.category:
            logger.debug(f"{self.name} forwarding {message.category.name}")
            return Forward()
        return self.process(message)

    @abstractmethod
    def process(self, message: LogMessage) -> Outcome:
        pass


class FatalErrorHandler(LogHandler):

    category = LogType.FATAL_ERROR

    def process(self, message: LogMessage) -> Outcome:
        return Fail(FatalCondition(message.text))


class ErrorHandler(LogHandler):

    category = LogType.ERROR

    def __init__(self, filepath):
        self._filepath = Path(filepath)

    @property
    def filepath(self) -> Path:
        return self._filepath

    def process(self, message: LogMessage) -> Outcome:
        try:
            outfile = open(self._filepath, "a", encoding="utf-8")
        except OSError as e:
            logger.info("Error log unavailable", extra={"path": str(self._filepath), "reason": str(e)})
            print(f"Failed to open file: {self._filepath}", file=sys.stderr)
            return Handled(self.name)

        # Write failures (disk full) propagate; only a failed open is recovered.
        with outfile:
            outfile.write(f"Error: {message.text}\n")
        return Handled(self.name)


class WarningHandler(LogHandler):

    category = LogType.WARNING

    def __init__(self, stream=None):
        self._stream = stream

    def process(self, message: LogMessage) -> Outcome:
        print(f"Warning: {message.text}", file=self._stream or sys.stdout)
        return Handled(self.name)


class UnknownHandler(LogHandler):

    category = LogType.UNKNOWN

    def process(self, message: LogMessage) -> Outcome:
        return Fail(UnknownMessage(message.text))
