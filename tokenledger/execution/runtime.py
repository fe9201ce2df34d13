from tokenledger import config


class Context:
    def __init__(self, base_state, maxlen=config.CONTEXT_DEPTH_LIMIT):
        self._state = []
        self._base_state = base_state
        self._maxlen = maxlen

    def _get_state(self):
        if len(self._state) == 0:
            return self._base_state
        return self._state[-1]

    def _add_state(self, state: dict):
        if len(self._state) < self._maxlen:
            self._state.append(state)

    def _pop_state(self):
        if len(self._state) > 0:
            self._state.pop(-1)

    def _reset(self):
        self._state = []

    def set_base_state(self, caller):
        self._base_state = {'caller': caller}
        self._reset()

    def current_caller(self):
        return self.caller

    @property
    def caller(self):
        return self._get_state()['caller']


def empty_context():
    return Context({'caller': None})
