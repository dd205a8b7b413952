"""
    statekeeper.core
    ----------------

    This module contains the central parts of statekeeper which are the state machine logic and the
    undo/redo history kept over state changes.
"""

import logging

from collections import OrderedDict
from collections.abc import Mapping

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())


def listify(obj):
    """Wraps a passed object into a list in case it has not been a list, tuple before.
    Returns an empty list in case ``obj`` is None.
    Args:
        obj: instance to be converted into a list.
    Returns:
        list: May also return a tuple in case ``obj`` has been a tuple before.
    """
    if obj is None:
        return []

    return obj if isinstance(obj, (list, tuple)) else [obj]


class Machine(object):
    """ Machine tracks the current state of a finite state machine described by a configuration mapping.
    Every state change is recorded in a linear history which can be walked back (undo) and forth (redo).

    Attributes:
        config (dict): The configuration the machine has been created with. It is never modified.
        initial (str): Name of the initial state. It is not required to be a declared state.
        states (OrderedDict): Transition tables of all declared states ordered as in the configuration.
        name (str): Name of the ``Machine`` instance mainly used for easier log message distinction.
    """

    transitions_key = 'transitions'  # per state entry holding the event -> destination mapping

    def __init__(self, config, name=None):
        """
        Args:
            config (dict): A mapping with the keys 'initial' and 'states'. 'states' maps state names to
                definitions which may contain a 'transitions' mapping from event names to destination states.
            name (str): If a name is set, it will be used as a prefix for logger output
        """
        if config is None:
            raise ConfigError("Machine requires a configuration.")
        if not isinstance(config, Mapping):
            raise ConfigError("Configuration must be a mapping but is %r." % type(config).__name__)

        self.config = config
        self.name = name + ": " if name is not None else ""
        self.initial = config.get('initial')
        self.states = self._parse_states(config.get('states'))

        self._current = self.initial
        self._past_states = [self.initial]
        self._undone_states = []
        _LOGGER.debug("%sInitialized machine with %d states in state %s.",
                      self.name, len(self.states), self.initial)

    @classmethod
    def _parse_states(cls, states):
        if not isinstance(states, Mapping):
            raise ConfigError("Configuration entry 'states' must be a mapping of state definitions.")
        parsed = OrderedDict()
        for name, definition in states.items():
            if definition is not None and not isinstance(definition, Mapping):
                raise ConfigError("Definition of state '%s' must be a mapping." % name)
            transitions = (definition or {}).get(cls.transitions_key)
            if transitions is None:
                transitions = {}
            elif not isinstance(transitions, Mapping):
                raise ConfigError("Transitions of state '%s' must be a mapping of events to states." % name)
            parsed[name] = OrderedDict(transitions)
        return parsed

    @property
    def state(self):
        """ The currently active state. """
        return self._current

    @property
    def history(self):
        """ Visited states, oldest first. The last entry is the current state. """
        return tuple(self._past_states)

    @property
    def undone(self):
        """ States removed by ``undo`` which can be restored by ``redo``; the next one comes last. """
        return tuple(self._undone_states)

    def get_state(self):
        """ Return the name of the active state. """
        return self._current

    def is_state(self, state):
        """ Check whether the current state matches the named state. """
        return self._current == state

    def change_state(self, state):
        """ Go to a declared state regardless of the transitions of the current state.
        Args:
            state (str): name of the destination state
        Returns:
            Machine: the machine itself to allow chaining.
        """
        if state not in self.states:
            _LOGGER.debug("%sRejected change to undeclared state %s.", self.name, state)
            raise UnknownStateError(state)
        self._push(state)
        self._undone_states = []
        return self

    def trigger(self, event):
        """ Change state according to the transition declared for ``event`` in the current state.
        Args:
            event (str): name of the event
        Returns:
            Machine: the machine itself to allow chaining.
        """
        transitions = self.states.get(self._current, {})
        if event not in transitions:
            _LOGGER.debug("%sNo transition for event %s in state %s.", self.name, event, self._current)
            raise InvalidTransitionError(self._current, event)
        _LOGGER.debug("%sProcessing event %s in state %s...", self.name, event, self._current)
        return self.change_state(transitions[event])

    def may_trigger(self, event):
        """ Check whether ``trigger(event)`` would succeed in the current state. """
        transitions = self.states.get(self._current, {})
        return event in transitions and transitions[event] in self.states

    def reset(self):
        """ Go back to the initial state. The redo stack is kept. """
        _LOGGER.debug("%sResetting to initial state %s.", self.name, self.initial)
        self._push(self.initial)

    def get_states(self, event=None):
        """ Return the names of all states. If ``event`` is passed, only states with a transition for it
            are returned.
        Args:
            event (str): Optional event name used as a filter.
        Returns:
            list of state names in configuration order.
        """
        if not event:
            return list(self.states)
        return [name for name, transitions in self.states.items() if transitions.get(event)]

    def get_triggers(self, *states):
        """ Collects all events declared FROM certain states.
        Args:
            *states: Tuple of source states. Defaults to the current state.

        Returns:
            list of event names.
        """
        names = states or (self._current,)
        triggers = OrderedDict()
        for name in names:
            for event in self.states.get(name, {}):
                triggers[event] = True
        return list(triggers)

    def undo(self):
        """ Go back to the previous state.
        Returns:
            bool: False if there is nothing to undo.
        """
        if len(self._past_states) <= 1:
            _LOGGER.debug("%sNothing to undo in state %s.", self.name, self._current)
            return False
        self._undone_states.append(self._current)
        self._past_states.pop()
        self._current = self._past_states[-1]
        _LOGGER.debug("%sUndo: returned to state %s.", self.name, self._current)
        return True

    def redo(self):
        """ Restore the state removed by the last undo.
        Returns:
            bool: False if there is nothing to redo.
        """
        if not self._undone_states:
            _LOGGER.debug("%sNothing to redo in state %s.", self.name, self._current)
            return False
        self._push(self._undone_states.pop())
        return True

    def clear_history(self):
        """ Forget all visited states except the current one. """
        _LOGGER.debug("%sClearing %d history entries.", self.name, len(self._past_states) - 1)
        self._past_states = [self._current]

    def _push(self, state):
        self._past_states.append(state)
        self._current = state
        _LOGGER.info("%sEntered state %s.", self.name, state)

    def __repr__(self):
        return "<%s('%s')@%s>" % (type(self).__name__, self._current, id(self))


class MachineError(Exception):
    """ MachineError is used for issues related to state transitions and machine configuration.
    All errors raised by ``Machine`` derive from it.
    """

    def __init__(self, value):
        super(MachineError, self).__init__(value)
        self.value = value

    def __str__(self):
        return repr(self.value)


class ConfigError(MachineError):
    """ Raised when a machine is created without a (valid) configuration. """


class UnknownStateError(MachineError):
    """ Raised when changing to a state which has not been declared. """

    def __init__(self, state):
        super(UnknownStateError, self).__init__("State '%s' is not a registered state." % state)
        self.state = state


class InvalidTransitionError(MachineError):
    """ Raised when the current state declares no transition for a triggered event. """

    def __init__(self, state, event):
        super(InvalidTransitionError, self).__init__(
            "Can't trigger event %s from state %s!" % (event, state))
        self.state = state
        self.event = event
