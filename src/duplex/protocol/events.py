""" A small publish/subscribe object. A :class:`DuplexChannel` and every
    receiver compose one of these rather than inheriting event behavior.
"""

from loguru import logger

from .. import weakref


class Events:
    """ Register callbacks by event name, and invoke them in the order they
        were registered whenever :func:`trigger` is called for that name.
        Callbacks registered without a name see every event, and receive
        the event name as their first argument.
    """

    def __init__(self):
        self.callback_all = list()
        self.callback_specific = dict()


    def on(self, name, callback, weak=False):
        """ Register *callback* for the event *name*, or for every event if
            *name* is None. If *weak* is True only a weak reference to the
            callback is retained, and the registration quietly goes away
            when the callback (or the object it is bound to) does.
        """

        if weak:
            reference = weakref.ref(callback)
        else:
            reference = weakref.strong(callback)

        if name is None:
            self.callback_all.append(reference)
        else:
            try:
                references = self.callback_specific[name]
            except KeyError:
                references = list()
                self.callback_specific[name] = references

            references.append(reference)


    def once(self, name, callback):
        """ Register *callback* for a single delivery of the event *name*.
        """

        def wrapper(*args):
            self.off(name, wrapper)
            callback(*args)

        wrapper.once_of = callback
        self.on(name, wrapper)


    def off(self, name=None, callback=None):
        """ Remove registrations. With no arguments everything is removed;
            with only a *name*, everything for that name; with only a
            *callback*, that callback wherever it was registered.
        """

        if name is None and callback is None:
            self.callback_all.clear()
            self.callback_specific.clear()
            return

        if name is None:
            self._discard(self.callback_all, callback)
            names = tuple(self.callback_specific)
        else:
            names = (name,)

        for name in names:
            try:
                references = self.callback_specific[name]
            except KeyError:
                continue

            if callback is None:
                references.clear()
            else:
                self._discard(references, callback)

            if len(references) == 0:
                del self.callback_specific[name]


    def listening(self, name=None):
        """ Return True if anything would receive the event *name*.
        """

        if self.callback_all:
            return True

        if name is None:
            return len(self.callback_specific) > 0

        return name in self.callback_specific


    def trigger(self, name, *args):
        """ Invoke any/all callbacks registered via :func:`on` for the event
            *name*. A callback raising an exception is logged; the remaining
            callbacks are still invoked.
        """

        if self.callback_specific:
            try:
                references = self.callback_specific[name]
            except KeyError:
                pass
            else:
                self._propagate(references, args)

                if len(references) == 0:
                    self.callback_specific.pop(name, None)

        if self.callback_all:
            self._propagate(self.callback_all, (name,) + args)


    def _discard(self, references, callback):

        for reference in tuple(references):
            target = reference()

            if target is None:
                continue

            if target == callback or getattr(target, 'once_of', None) == callback:
                references.remove(reference)


    def _propagate(self, references, args):

        invalid = list()

        # Iterate over a copy; callbacks are allowed to call on() or off().

        for reference in tuple(references):
            callback = reference()

            if callback is None:
                invalid.append(reference)
                continue

            try:
                callback(*args)
            except Exception:
                logger.exception(f"event callback {callback!r} failed")
                continue

        for reference in invalid:
            try:
                references.remove(reference)
            except ValueError:
                pass


# end of class Events


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
