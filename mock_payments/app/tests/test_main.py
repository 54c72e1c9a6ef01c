import socket

import pytest

from ..core.config import Settings
from ..core.db import set_engine
from ..main import run


@pytest.fixture
def taken_port(engine):
    set_engine(engine)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
        taken.bind(("127.0.0.1", 0))
        taken.listen()
        yield taken.getsockname()[1]
    set_engine(None)


def test_run_exits_with_status_one_when_port_is_taken(taken_port) -> None:
    busy = Settings(_env_file=None, host="127.0.0.1", port=taken_port)

    with pytest.raises(SystemExit) as exc_info:
        run(busy)

    assert exc_info.value.code == 1
