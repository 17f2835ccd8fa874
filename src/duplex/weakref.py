import weakref


def ref(thing):
    """ Return a weak reference to *thing*. Bound methods get a
        :class:`weakref.WeakMethod`, since a plain reference to a bound
        method dies as soon as the temporary method object does.
    """

    try:
        thing.__func__
        thing.__self__
    except AttributeError:
        return weakref.ref(thing)

    return weakref.WeakMethod(thing)


def strong(thing):
    """ Wrap *thing* so that it can be dereferenced the same way as the
        return value of :func:`ref`, without holding it weakly.
    """

    return lambda: thing


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
