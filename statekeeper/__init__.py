"""
statekeeper
-----------

A lightweight, object-oriented finite state machine with undo and redo history over its state changes.
"""

from .version import __version__
from .core import (Machine, MachineError, ConfigError, UnknownStateError, InvalidTransitionError)

__copyright__ = "Copyright (c) 2026 statekeeper contributors"
__license__ = "MIT"
__summary__ = "A lightweight finite state machine with linear undo/redo history"
__uri__ = "https://github.com/statekeeper/statekeeper"
