import sys
from typing import Optional, Sequence

from aws_lambda_powertools import Logger

from log_chain import chain as chain_module
from log_chain import handlers as handlers_module
from log_chain.chain import LogChain, build_default_chain
from log_chain.config import SERVICE_NAME, ChainConfig, parse_args
from log_chain.messages import LogMessage, LogType
from log_chain.outcomes import DispatchResult, FatalCondition, UnknownMessage


DEMO_MESSAGES = (
    LogMessage(LogType.WARNING, "This is a warning message."),
    LogMessage(LogType.ERROR, "This is an error message."),
    LogMessage(LogType.FATAL_ERROR, "This is a fatal error message."),
    LogMessage(LogType.UNKNOWN, "This is an unknown message."),
)


class _CurrentStderr:
    """Writes to whatever ``sys.stderr`` is at emit time, not at setup time."""

    def write(self, text):
        return sys.stderr.write(text)

    def flush(self):
        sys.stderr.flush()


def configure_logging(config: ChainConfig) -> Logger:
    # Powertools sets a service logger up only once per process; the level
    # has to be applied to the parent and to every module child each call.
    logger = Logger(service=SERVICE_NAME, stream=_CurrentStderr())
    logger.setLevel(config.log_level)
    for child in (handlers_module.logger, chain_module.logger):
        child.setLevel(config.log_level)
    return logger


def dispatch(chain: LogChain, message: LogMessage) -> DispatchResult:
    result = chain.handle(message)
    if isinstance(result, (FatalCondition, UnknownMessage)):
        print(f"Caught exception: {result.description}", file=sys.stderr)
    return result


def run_demo(chain: LogChain, messages=DEMO_MESSAGES) -> list[DispatchResult]:
    return [dispatch(chain, message) for message in messages]


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    logger = configure_logging(config)
    chain = build_default_chain(config.error_log_path)
    logger.debug(f"Built {chain!r}")

    results = run_demo(chain)
    logger.info("Demo finished", extra={"dispatched": len(results)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
