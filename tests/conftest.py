import pytest

from loguru import logger


@pytest.fixture
def diagnostics():
    """ Collect the text of every message logged while the test runs.
    """

    messages = list()

    def sink(message):
        record = message.record
        messages.append((record['level'].name, record['message']))

    handler = logger.add(sink, level='DEBUG')

    yield messages

    logger.remove(handler)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
