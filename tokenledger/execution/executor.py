from tokenledger.execution.runtime import Context, empty_context
from tokenledger.events import deliver
from tokenledger.exceptions import FunctionNotExported
from tokenledger.ledger import Ledger
from tokenledger.logger import get_logger
from tokenledger import config
from copy import deepcopy
import threading
import traceback

log = get_logger('Executor')


class Executor:
    """
    Runs ledger operations on behalf of a host, one at a time.

    The executor takes over the ledger's event sink. Events raised during a call
    are held until the call's writes are committed to the store and are then
    handed to the original sink outside the lock. A failed call restores the
    pending state to what it was before the call and drops its events.
    """
    def __init__(self, ledger: Ledger, context: Context = None):
        self.ledger = ledger
        self.driver = ledger.driver
        self.context = context or empty_context()

        self.sink = ledger.sink
        self.ledger.sink = self

        self.pending_events = []
        self._call_events = []
        self._lock = threading.RLock()

    def emit(self, event):
        self._call_events.append(event)

    def execute(self, sender, function_name, kwargs=None, auto_commit=True) -> dict:
        kwargs = kwargs or {}
        committed = []

        with self._lock:
            checkpoint = self.driver.checkpoint()
            self._call_events = []
            self.context._add_state({'caller': sender})

            try:
                if function_name not in config.EXPORTED_FUNCTIONS:
                    raise FunctionNotExported(function=function_name)

                func = getattr(self.ledger, function_name)
                result = func(self.context.current_caller(), **kwargs)
                status_code = 0
            except Exception as e:
                result = e
                status_code = 1
                log.error(str(e))
                log.debug(traceback.format_exc())
            finally:
                self.context._pop_state()

            if status_code == 0:
                writes = deepcopy(self.driver.pending_writes)
                self.pending_events.extend(self._call_events)

                if auto_commit:
                    committed = self._commit()
            else:
                self.driver.restore(checkpoint)
                writes = deepcopy(self.driver.pending_writes)

            self._call_events = []

        self._deliver(committed)

        return {
            'status_code': status_code,
            'result': result,
            'writes': writes
        }

    def commit(self):
        with self._lock:
            committed = self._commit()

        self._deliver(committed)

    def _commit(self):
        self.driver.commit()

        events, self.pending_events = self.pending_events, []
        return events

    def _deliver(self, events):
        for event in events:
            deliver(self.sink, event)

    def query(self, function_name, kwargs=None):
        assert function_name in config.QUERY_FUNCTIONS, 'Function {} is not a query.'.format(function_name)

        with self._lock:
            return getattr(self.ledger, function_name)(**(kwargs or {}))
