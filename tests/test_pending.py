import asyncio
import pytest

from duplex.protocol.pending import PendingRequest, RequestsAwaitingResponses


@pytest.mark.asyncio
async def test_add_get_remove():
    registry = RequestsAwaitingResponses(send_timeout=10)
    request = PendingRequest('00000001', 'ping', {'x': 1})

    registry.add('00000001', request)

    assert '00000001' in registry
    assert registry.get('00000001') is request
    assert request.timeout is not None

    removed = registry.remove('00000001')

    assert removed is request
    assert registry.get('00000001') is None
    assert request.timeout.cancelled()
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_remove_absent_is_a_no_op():
    registry = RequestsAwaitingResponses()
    assert registry.remove('missing') is None
    assert registry.get('missing') is None


@pytest.mark.asyncio
async def test_clear_cancels_every_timer(diagnostics):
    registry = RequestsAwaitingResponses(send_timeout=0.05)
    requests = [PendingRequest(str(number), 'cmd' + str(number)) for number in range(3)]

    for request in requests:
        registry.add(request.correlation_id, request)

    removed = registry.clear()

    assert len(registry) == 0
    assert set(removed) == set(requests)
    assert all(request.timeout.cancelled() for request in requests)

    await asyncio.sleep(0.1)
    assert diagnostics == []


@pytest.mark.asyncio
async def test_expiry_logs_and_notifies(diagnostics):
    expired = list()
    registry = RequestsAwaitingResponses(send_timeout=0.1, expired=expired.append)
    request = PendingRequest('abc', 'fxaccounts:can_link_account')
    sibling = PendingRequest('def', 'other')

    registry.add('abc', request)
    await asyncio.sleep(0.06)
    registry.add('def', sibling)
    await asyncio.sleep(0.06)

    assert expired == [request]
    assert ('ERROR', 'Response not received for: fxaccounts:can_link_account') in diagnostics

    # The sibling's timer is independent.

    assert sibling.timeout.cancelled() == False
    registry.remove('def')


@pytest.mark.asyncio
async def test_first_resolution_wins():
    request = PendingRequest('abc', 'ping')

    assert request._complete('first') == True
    assert request._complete('second') == False
    assert request._fail(RuntimeError('late')) == False
    assert request.future.result() == 'first'


def test_timeout_must_be_positive():
    with pytest.raises(ValueError):
        RequestsAwaitingResponses(send_timeout=0)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
