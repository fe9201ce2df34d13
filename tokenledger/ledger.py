"""
The account-balance ledger.

Balances, allowances and the total supply live in a ``LedgerDriver`` under the
ledger's name. Every mutating operation takes the calling identity explicitly,
checks all of its preconditions before the first write, and emits its event
only after the writes are made. A failed precondition raises a typed
``LedgerError`` and leaves the store untouched.

Two behaviours are kept as they were first deployed and are not corrected here:
``issue`` raises the total supply without crediting any balance, and ``burn``
debits a balance without lowering the total supply. ``circulating_supply``
exposes the resulting difference.
"""

from tokenledger.db.driver import LedgerDriver
from tokenledger.db.orm import Variable, Hash
from tokenledger.events import Transfer, Approval, Burn, deliver
from tokenledger.exceptions import InsufficientBalance, InsufficientAllowance, ArithmeticOverflow, \
    InvalidAmount, InvalidAccount, LedgerExists
from tokenledger.logger import get_logger
from tokenledger import config

log = get_logger('Ledger')


def check_amount(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(value=value)
    if value < 0 or value > config.MAX_AMOUNT:
        raise InvalidAmount(value=value)
    return value


def check_account(account):
    if account is None:
        raise InvalidAccount(account=account)

    if isinstance(account, (str, bytes)) and len(account) == 0:
        raise InvalidAccount(account=account)

    # Identities are stored under their string form, which must not be able to alias another key
    key = str(account)
    if config.DELIMITER in key or config.INDEX_SEPARATOR in key or len(key) > config.MAX_KEY_SIZE:
        raise InvalidAccount(account=account)

    return account


def checked_add(a, b):
    total = a + b
    if total > config.MAX_AMOUNT:
        raise ArithmeticOverflow(value=total, limit=config.MAX_AMOUNT)
    return total


class Ledger:
    def __init__(self, driver: LedgerDriver = None, sink=None, name=config.LEDGER_NAME):
        self.driver = driver or LedgerDriver()
        self.sink = sink
        self.name = name

        self.balances = Hash(name, config.BALANCES_NAME, driver=self.driver, default_value=0)
        self.allowances = Hash(name, config.ALLOWANCES_NAME, driver=self.driver, default_value=0)
        self.supply = Variable(name, config.SUPPLY_NAME, driver=self.driver, t=int, default_value=0)

    @classmethod
    def exists(cls, driver: LedgerDriver, name=config.LEDGER_NAME):
        return driver.get_var(name, config.SUPPLY_NAME) is not None

    @classmethod
    def new(cls, caller, initial_supply, driver: LedgerDriver = None, sink=None, name=config.LEDGER_NAME):
        check_account(caller)
        check_amount(initial_supply)

        driver = driver or LedgerDriver()
        if cls.exists(driver, name):
            raise LedgerExists(name=name)

        ledger = cls(driver=driver, sink=sink, name=name)
        ledger.supply.set(initial_supply)
        ledger.balances[caller] = initial_supply

        log.debug('Ledger {} created by {} with supply {}'.format(name, caller, initial_supply))
        return ledger

    @classmethod
    def default(cls, caller, driver: LedgerDriver = None, sink=None, name=config.LEDGER_NAME):
        return cls.new(caller, 0, driver=driver, sink=sink, name=name)

    # Queries

    def total_supply(self):
        return self.supply.get()

    def balance_of(self, account):
        return self.balances[account]

    def allowance(self, owner, spender):
        return self.allowances[owner, spender]

    def circulating_supply(self):
        return sum(self.balances.all())

    # Mutations

    def approve(self, caller, spender, value):
        check_account(caller)
        check_account(spender)
        check_amount(value)

        self.allowances[caller, spender] = value
        log.debug('{} approved {} to spend {}'.format(caller, spender, value))

        self._emit(Approval(caller, spender, value))

    def issue(self, caller, value):
        check_account(caller)
        check_amount(value)

        supply = checked_add(self.total_supply(), value)
        self.supply.set(supply)

        log.debug('{} issued {}, total supply is now {}'.format(caller, value, supply))

    def transfer(self, caller, to, value):
        self.transfer_from_to(caller, to, value)

    def transfer_from_to(self, sender, to, value):
        check_account(sender)
        check_account(to)
        check_amount(value)

        sender_balance = self.balance_of(sender)
        if sender_balance < value:
            log.warning('Transfer of {} from {} rejected, balance is {}'.format(value, sender, sender_balance))
            raise InsufficientBalance(account=sender, balance=sender_balance, value=value)

        # When both sides are the same account the credit applies to the debited balance
        new_sender_balance = sender_balance - value
        if self.balances.storage_key(to) == self.balances.storage_key(sender):
            to_balance = new_sender_balance
        else:
            to_balance = self.balance_of(to)
        new_to_balance = checked_add(to_balance, value)

        self.balances[sender] = new_sender_balance
        self.balances[to] = new_to_balance

        log.debug('Transferred {} from {} to {}'.format(value, sender, to))
        self._emit(Transfer(sender, to, value))

    def transfer_from(self, caller, sender, to, value):
        check_account(caller)
        check_account(sender)
        check_amount(value)

        allowance = self.allowance(sender, caller)
        if allowance < value:
            log.warning('Delegated transfer of {} from {} by {} rejected, allowance is {}'.format(
                value, sender, caller, allowance))
            raise InsufficientAllowance(owner=sender, spender=caller, allowance=allowance, value=value)

        self.transfer_from_to(sender, to, value)
        self.allowances[sender, caller] = allowance - value

    def burn(self, caller, value):
        check_account(caller)
        check_amount(value)

        balance = self.balance_of(caller)
        if balance < value:
            log.warning('Burn of {} by {} rejected, balance is {}'.format(value, caller, balance))
            raise InsufficientBalance(account=caller, balance=balance, value=value)

        self.balances[caller] = balance - value

        log.debug('{} burned {}'.format(caller, value))
        self._emit(Burn(caller, value))

    def _emit(self, event):
        deliver(self.sink, event)
