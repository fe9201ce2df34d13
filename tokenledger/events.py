"""
State-change records emitted by the ledger and the sinks that receive them.

A sink is any object with an ``emit(event)`` method. The ledger never depends
on delivery succeeding: see ``deliver``.
"""

from tokenledger.logger import get_logger

log = get_logger('Events')


class Event:
    name = 'Event'
    fields = ()

    def __init__(self, *args, **kwargs):
        assert len(args) <= len(self.fields), '{} takes at most {} values.'.format(self.name, len(self.fields))

        self._data = dict(zip(self.fields, args))

        for k, v in kwargs.items():
            assert k in self.fields, 'Unknown field {} for {}.'.format(k, self.name)
            assert k not in self._data, 'Field {} given twice.'.format(k)
            self._data[k] = v

        for f in self.fields:
            self._data.setdefault(f, None)

    def __getitem__(self, item):
        return self._data[item]

    def __eq__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return self.name == other.name and self._data == other._data

    def __repr__(self):
        return '{}({})'.format(self.name, ', '.join('{}={!r}'.format(f, self._data[f]) for f in self.fields))

    @property
    def value(self):
        return self._data['value']

    def to_dict(self):
        d = {'event': self.name}
        d.update(self._data)
        return d


class Transfer(Event):
    name = 'Transfer'
    fields = ('from', 'to', 'value')


class Approval(Event):
    name = 'Approval'
    fields = ('owner', 'spender', 'value')


class Burn(Event):
    name = 'Burn'
    fields = ('caller', 'value')


class EventLog:
    def __init__(self):
        self.events = []

    def emit(self, event):
        self.events.append(event)

    def of_type(self, name):
        return [e for e in self.events if e.name == name]

    def clear(self):
        self.events = []

    def __len__(self):
        return len(self.events)

    def __iter__(self):
        return iter(self.events)


class LoggingSink:
    def __init__(self, logger=None):
        self.log = logger or log

    def emit(self, event):
        self.log.info('{}'.format(event))


class MultiSink:
    def __init__(self, *sinks):
        self.sinks = list(sinks)

    def emit(self, event):
        for sink in self.sinks:
            deliver(sink, event)


def deliver(sink, event):
    # Fire and forget. A failing sink is reported, the state change stands.
    if sink is None:
        return

    try:
        sink.emit(event)
    except Exception as e:
        log.error('Sink {} failed to deliver {}: {}'.format(type(sink).__name__, event, e))
