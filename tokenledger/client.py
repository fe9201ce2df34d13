from tokenledger.execution.executor import Executor
from tokenledger.execution.runtime import empty_context
from tokenledger.db.driver import LedgerDriver
from tokenledger.ledger import Ledger
from tokenledger import config


class LedgerClient:
    def __init__(self, signer='sys',
                 driver=None,
                 sink=None,
                 initial_supply=0,
                 name=config.LEDGER_NAME):

        self.raw_driver = driver or LedgerDriver()
        self.signer = signer
        self.name = name

        # Seed the ledger into the store the first time it is used
        if Ledger.exists(self.raw_driver, name):
            self.ledger = Ledger(driver=self.raw_driver, sink=sink, name=name)
        else:
            self.ledger = Ledger.new(signer, initial_supply, driver=self.raw_driver, sink=sink, name=name)
            self.raw_driver.commit()

        self.context = empty_context()
        self.context.set_base_state(caller=signer)

        self.executor = Executor(self.ledger, context=self.context)

    def flush(self, initial_supply=0):
        # flushes db and reseeds the ledger
        self.raw_driver.flush()
        self.ledger = Ledger.new(self.signer, initial_supply, driver=self.raw_driver, sink=self.executor.sink,
                                 name=self.name)
        self.raw_driver.commit()
        self.executor = Executor(self.ledger, context=self.context)

    def _call(self, func, signer=None, **kwargs):
        output = self.executor.execute(sender=signer or self.signer,
                                       function_name=func,
                                       kwargs=kwargs)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']

    def total_supply(self):
        return self.executor.query('total_supply')

    def balance_of(self, account):
        return self.executor.query('balance_of', {'account': account})

    def allowance(self, owner, spender):
        return self.executor.query('allowance', {'owner': owner, 'spender': spender})

    def circulating_supply(self):
        return self.executor.query('circulating_supply')

    def approve(self, spender, value, signer=None):
        return self._call('approve', signer=signer, spender=spender, value=value)

    def transfer(self, to, value, signer=None):
        return self._call('transfer', signer=signer, to=to, value=value)

    def transfer_from(self, sender, to, value, signer=None):
        return self._call('transfer_from', signer=signer, sender=sender, to=to, value=value)

    def issue(self, value, signer=None):
        return self._call('issue', signer=signer, value=value)

    def burn(self, value, signer=None):
        return self._call('burn', signer=signer, value=value)

    def get_var(self, variable, arguments=()):
        return self.raw_driver.get_var(self.name, variable, arguments)
