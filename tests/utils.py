from copy import deepcopy
from statekeeper import Machine


SIMPLE = {
    'initial': 'idle',
    'states': {
        'idle': {'transitions': {'start': 'running'}},
        'running': {'transitions': {'stop': 'idle'}},
    }
}

# A workflow with dead ends and events shared between states
WORKFLOW = {
    'initial': 'draft',
    'states': {
        'draft': {'transitions': {'submit': 'review', 'discard': 'archived'}},
        'review': {'transitions': {'approve': 'published', 'reject': 'draft', 'discard': 'archived'}},
        'published': {'transitions': {'retract': 'draft'}},
        'archived': {'transitions': {}},
    }
}


def make_config(config=WORKFLOW):
    return deepcopy(config)


class Stuff(object):

    def __init__(self, config=None, machine_cls=Machine, extra_kwargs={}):
        self.config = make_config() if config is None else config
        kwargs = {'name': 'Test Machine'}
        kwargs.update(extra_kwargs)
        self.machine = machine_cls(self.config, **kwargs)
        self.machine_cls = machine_cls


class CounterContext(object):

    def __init__(self):
        self.counter = 0
        self.level = 0
        self.max = 0

    def __enter__(self):
        self.counter += 1
        self.level += 1
        self.max = max(self.level, self.max)

    def __exit__(self, *exc):
        self.level -= 1


class SomeContext(object):
    def __init__(self, event_list):
        self._event_list = event_list

    def __enter__(self):
        self._event_list.append((self, "enter"))

    def __exit__(self, type, value, traceback):
        self._event_list.append((self, "exit"))
