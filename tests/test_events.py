import gc

from duplex.protocol.events import Events


class Listener:

    def __init__(self):
        self.seen = list()

    def handle(self, data):
        self.seen.append(data)


def test_delivery_in_subscription_order():
    events = Events()
    order = list()

    events.on('pong', lambda data: order.append(('a', data)))
    events.on('pong', lambda data: order.append(('b', data)))
    events.on('ping', lambda data: order.append(('c', data)))

    events.trigger('pong', 1)

    assert order == [('a', 1), ('b', 1)]


def test_failing_subscriber_does_not_affect_others(diagnostics):
    events = Events()
    seen = list()

    def broken(data):
        raise RuntimeError('subscriber exploded')

    events.on('pong', broken)
    events.on('pong', seen.append)

    events.trigger('pong', 'data')

    assert seen == ['data']
    assert any(level == 'ERROR' for level, text in diagnostics)


def test_catch_all_subscriber_receives_name():
    events = Events()
    seen = list()

    events.on(None, lambda name, *args: seen.append((name,) + args))
    events.trigger('one', 1)
    events.trigger('two')

    assert seen == [('one', 1), ('two',)]


def test_once():
    events = Events()
    seen = list()

    events.once('pong', seen.append)
    events.trigger('pong', 1)
    events.trigger('pong', 2)

    assert seen == [1]
    assert events.listening('pong') == False


def test_off_removes_once_by_its_callback():
    events = Events()
    seen = list()

    events.once('pong', seen.append)
    events.off('pong', seen.append)

    assert events.listening('pong') == False
    events.trigger('pong', 1)
    assert seen == []

    events.once('pong', seen.append)
    events.off(callback=seen.append)
    assert events.listening('pong') == False


def test_off():
    events = Events()
    listener = Listener()
    other = list()

    events.on('pong', listener.handle)
    events.on('ping', listener.handle)
    events.on('pong', other.append)

    events.off(callback=listener.handle)
    events.trigger('pong', 1)
    events.trigger('ping', 2)

    assert listener.seen == []
    assert other == [1]

    events.off('pong')
    assert events.listening('pong') == False

    events.on(None, other.append)
    events.off()
    assert events.listening() == False


def test_weak_subscription_goes_away():
    events = Events()
    listener = Listener()

    events.on('pong', listener.handle, weak=True)
    events.trigger('pong', 1)
    assert listener.seen == [1]

    del listener
    gc.collect()

    events.trigger('pong', 2)
    assert events.listening('pong') == False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
