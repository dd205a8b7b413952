"""
statekeeper.extensions
----------------------

Additional functionality such as threadsafe execution of machine methods.
"""

from .locking import LockedMachine
