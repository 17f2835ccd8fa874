""" An in-process stand-in for the host environment a web channel lives in:
    a "window" that custom events are dispatched on and listened for. An
    embedding application bridges this object to whatever actually carries
    the events; tests use it directly as a loopback bus.
"""

from loguru import logger


class CustomEvent:
    """ A named event carrying an arbitrary *detail* object.
    """

    def __init__(self, type, detail=None):
        self.type = type
        self.detail = detail


    def __repr__(self):
        return 'CustomEvent(%r, %r)' % (self.type, self.detail)


# end of class CustomEvent



class EventTarget:
    """ Listeners are registered per event type and invoked synchronously,
        in registration order, by :func:`dispatch_event`. A listener raising
        an exception is logged and does not prevent delivery to the rest.
    """

    def __init__(self):
        self.listeners = dict()


    def add_event_listener(self, type, listener):

        try:
            listeners = self.listeners[type]
        except KeyError:
            listeners = list()
            self.listeners[type] = listeners

        # Registering the same listener twice has no additional effect.

        if listener not in listeners:
            listeners.append(listener)


    def remove_event_listener(self, type, listener):

        try:
            listeners = self.listeners[type]
        except KeyError:
            return

        try:
            listeners.remove(listener)
        except ValueError:
            return

        if len(listeners) == 0:
            del self.listeners[type]


    def dispatch_event(self, event):

        try:
            listeners = self.listeners[event.type]
        except KeyError:
            return

        for listener in tuple(listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(f"listener for {event.type} failed")


# end of class EventTarget


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
