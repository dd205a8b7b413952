"""
    statekeeper.extensions.locking
    ------------------------------

    Adds locking to machine methods. Additionally, the user can inject her/his own context manager
    into the machine if required.
"""

from contextlib import ExitStack, contextmanager
from functools import partial
from threading import Lock, get_ident
import inspect

from statekeeper.core import Machine, listify


@contextmanager
def nested(*contexts):
    """ Enters all passed contexts in order and exits them in reverse order. """
    with ExitStack() as stack:
        for ctx in contexts:
            stack.enter_context(ctx)
        yield contexts


class PicklableLock:
    """ A wrapper for threading.Lock which discards its state during pickling and
        is reinitialized unlocked when unpickled.
    """

    def __init__(self):
        self.lock = Lock()

    def __getstate__(self):
        return ''

    def __setstate__(self, value):
        return self.__init__()

    def __enter__(self):
        self.lock.__enter__()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.lock.__exit__(exc_type, exc_val, exc_tb)


class IdentManager:
    """  Manages the identity of threads to detect whether the current thread already has a lock. """

    def __init__(self):
        self.current = 0

    def __enter__(self):
        self.current = get_ident()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.current = 0


class LockedMachine(Machine):
    """ Machine class which manages contexts. In it's default version the machine uses a `threading.Lock`
        context to lock access to its methods.
    Attributes:
        machine_context (list): A list of context managers to be entered whenever a machine method is
            called. Nested calls from the thread holding the contexts do not enter them again.
    """

    def __init__(self, config, name=None, machine_context=None):
        """
        Args:
            config (dict): see ``statekeeper.core.Machine``.
            name (str): see ``statekeeper.core.Machine``.
            machine_context (list or object): Context manager(s) entered on every method call.
                Defaults to a (picklable) ``threading.Lock``.
        """
        self._ident = IdentManager()
        self.machine_context = list(listify(machine_context)) or [PicklableLock()]
        self.machine_context.append(self._ident)
        super(LockedMachine, self).__init__(config, name=name)

    def __getattribute__(self, item):
        get_attr = super(LockedMachine, self).__getattribute__
        tmp = get_attr(item)
        if not item.startswith('_') and inspect.ismethod(tmp):
            return partial(get_attr('_locked_method'), tmp)
        return tmp

    def _locked_method(self, func, *args, **kwargs):
        if self._ident.current != get_ident():
            with nested(*self.machine_context):
                return func(*args, **kwargs)
        else:
            return func(*args, **kwargs)
