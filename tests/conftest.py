import io
import logging

import pytest
from rich.console import Console

from dir_commander import FileCommander, logger


@pytest.fixture
def sandbox(tmp_path):
    """A directory holding a.txt with the content 'hello'."""
    root = tmp_path / "sandbox"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    return root


@pytest.fixture
def make_commander():
    """
    Build a FileCommander that reads the given answers line by line and
    writes stdout/stderr into StringIO buffers.
    """

    def factory(*answers, loop_session=False):
        out, err = io.StringIO(), io.StringIO()
        commander = FileCommander(
            console=Console(file=out, width=200),
            err_console=Console(file=err, width=200),
            input_stream=io.StringIO("".join(f"{answer}\n" for answer in answers)),
            loop_session=loop_session,
        )
        return commander, out, err

    return factory


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
