import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    # setup_logger replaces root handlers; put pytest's back afterwards
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def write_source(tmp_path):
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def ip_log(write_source):
    return write_source("access.log", [
        "ip=10.0.0.1 ok",
        "ip=10.0.0.1 dup",
        "ip=10.0.0.2 ok",
    ])
