class LedgerError(Exception):
    """
    The base exception for the ledger. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class InsufficientBalance(LedgerError):
    """
    An operation attempted to debit an account beyond its held amount

    :ivar account: The account being debited
    :ivar balance: What the account currently holds
    :ivar value: The amount requested
    """
    fmt = "Account '{account}' holds {balance}, cannot debit {value}"


class InsufficientAllowance(LedgerError):
    """
    A delegated transfer asked for more than the owner approved

    :ivar owner: The account the funds belong to
    :ivar spender: The account attempting to spend them
    :ivar allowance: The remaining approved amount
    :ivar value: The amount requested
    """
    fmt = "Spender '{spender}' may move {allowance} from '{owner}', requested {value}"


class ArithmeticOverflow(LedgerError):
    fmt = 'Result {value} exceeds the amount domain maximum {limit}'


class InvalidAmount(LedgerError):
    fmt = 'Amount {value!r} is not an integer in the unsigned amount domain'


class InvalidAccount(LedgerError):
    fmt = 'Account identity {account!r} is not valid'


class LedgerExists(LedgerError):
    """
    When attempting to initialize a ledger, found that it
    already exists in the store

    :ivar name: The name of the ledger
    """
    fmt = "Ledger with name '{name}' already exists in the store"


class FunctionNotExported(LedgerError):
    fmt = "Function '{function}' is not callable by a host"


class DatabaseDriverNotFound(LedgerError):
    """
    Could not find the specified database driver when
    looking for it

    :ivar driver: The name of the database driver the
                  the user attempted to load
    :ivar known_drivers: The list of known drivers
    """
    fmt = "Unknown database driver '{driver}', known drivers '{known_drivers}'"
