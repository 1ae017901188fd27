# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

# third-party
import pytest
from loguru import logger

# local
from bytekit import nsplit
from bytekit.logging import enabled


# ---------------------------------------------------------------------------- #
@pytest.fixture
def messages():
    records = []
    sink = logger.add(records.append, level='DEBUG', format='{message}')
    yield records
    logger.remove(sink)


def test_silent_by_default(messages):
    nsplit(b'ab', b'', policy='units')
    assert messages == []


def test_enabled(messages):
    with enabled():
        nsplit(b'ab', b'', policy='units')

    assert any('Empty separator' in message for message in messages)

    # disabled again on exit
    messages.clear()
    nsplit(b'ab', b'', policy='units')
    assert messages == []
