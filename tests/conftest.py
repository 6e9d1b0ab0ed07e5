import pytest

from log_chain.app import configure_logging
from log_chain.chain import build_default_chain
from log_chain.config import ChainConfig
from log_chain.messages import LogMessage, LogType


@pytest.fixture(autouse=True)
def default_logging():
    # Every test starts from the levels a plain run would use.
    configure_logging(ChainConfig())
    yield
    configure_logging(ChainConfig())


@pytest.fixture
def error_log(tmp_path):
    return tmp_path / "error_log.txt"


@pytest.fixture
def chain(error_log):
    return build_default_chain(error_log)


@pytest.fixture
def unwritable_path(tmp_path):
    # A directory cannot be opened for appending.
    path = tmp_path / "not_a_file"
    path.mkdir()
    return path


@pytest.fixture(params=list(LogType), ids=lambda t: t.name)
def any_message(request):
    return LogMessage(request.param, f"text for {request.param.name}")
