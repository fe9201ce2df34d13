from tokenledger.db.encoder import encode, decode, make_key
from tokenledger.exceptions import DatabaseDriverNotFound
from tokenledger.logger import get_logger
from tokenledger import config
import pymongo
import re

# DB maps bytes to bytes
# Driver maps string to python object

log = get_logger('Driver')


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        key = item.encode()
        return decode(self.db.get(key))

    def set(self, key: str, value):
        if value is None:
            self.__delitem__(key)
        else:
            self.db[key.encode()] = encode(value).encode()

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str = '', length=0):
        p = prefix.encode()

        keys = []
        for k in sorted(self.db.keys()):
            if k.startswith(p):
                keys.append(k.decode())
            if 0 < length <= len(keys):
                break

        return keys

    def keys(self):
        return self.iter('')

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        self.db.pop(key.encode(), None)


class MongoDriver:
    # conn_str see https://www.mongodb.com/docs/manual/reference/connection-string/
    def __init__(self, conn_str=config.DB_URL, db=config.DB_NAME, collection=config.DB_COLLECTION):
        self.client = pymongo.MongoClient(conn_str)
        self.db = self.client[db][collection]

    def get(self, item: str):
        v = self.db.find_one({'rawKey': item})
        if v is None:
            return None

        return decode(v['value'])

    def set(self, key: str, value):
        if value is None:
            self.__delitem__(key)
        else:
            self.db.update_one({'rawKey': key}, {'$set': {'value': encode(value)}}, upsert=True)

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str = '', length=0):
        cur = self.db.find({'rawKey': {'$regex': '^{}'.format(re.escape(prefix))}})

        keys = []
        for entry in cur:
            keys.append(entry['rawKey'])
            if 0 < length <= len(keys):
                break

        keys.sort()
        return keys

    def keys(self):
        return self.iter('')

    def flush(self):
        self.db.delete_many({})

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        self.db.delete_one({'rawKey': key})


DRIVERS = {
    'memory': InMemDriver,
    'mongo': MongoDriver,
}


def get_driver(db_type=config.DB_TYPE, **kwargs):
    driver = DRIVERS.get(db_type)
    if driver is None:
        raise DatabaseDriverNotFound(driver=db_type, known_drivers=sorted(DRIVERS.keys()))
    return driver(**kwargs)


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}
        self.pending_reads = {}
        self.driver = driver or InMemDriver()

    def find(self, key: str):
        # A pending None is a pending delete, so membership decides, not the value
        if key in self.pending_writes:
            return self.pending_writes[key]

        return self.driver.get(key)

    def get(self, key: str, save: bool = True):
        value = self.find(key)

        if save and key not in self.pending_reads:
            self.pending_reads[key] = value

        return value

    def set(self, key, value):
        if key not in self.pending_reads:
            self.get(key)

        self.pending_writes[key] = value

    def delete(self, key):
        self.set(key, None)

    def commit(self):
        log.debug('Committing {} pending writes'.format(len(self.pending_writes)))

        for k, v in self.pending_writes.items():
            if v is None:
                self.driver.delete(k)
            else:
                self.driver.set(k, v)

        self.pending_writes.clear()
        self.pending_reads = {}

    def rollback(self):
        if self.pending_writes:
            log.debug('Discarding {} pending writes'.format(len(self.pending_writes)))

        # Returns to store state which should be whatever it was prior to any write sessions
        self.pending_reads = {}
        self.pending_writes.clear()

    def clear_pending_state(self):
        self.rollback()

    def checkpoint(self):
        return dict(self.pending_writes), dict(self.pending_reads)

    def restore(self, checkpoint):
        # Drops only what was written since the checkpoint was taken
        writes, reads = checkpoint
        self.pending_writes = dict(writes)
        self.pending_reads = dict(reads)


class LedgerDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delimiter = config.INDEX_SEPARATOR

    def items(self, prefix=''):
        # Get all of the items in the cache currently
        _items = {}
        keys = set()

        for k, v in self.pending_writes.items():
            if k.startswith(prefix):
                keys.add(k)
                if v is not None:
                    _items[k] = v

        # Get all of the keys we need
        db_keys = set(self.driver.iter(prefix=prefix))

        # Subtract the already gotten keys
        for k in db_keys - keys:
            _items[k] = self.get(k)

        return _items

    def keys(self, prefix=''):
        return sorted(self.items(prefix).keys())

    def values(self, prefix=''):
        return list(self.items(prefix).values())

    def make_key(self, ledger, variable, args=()):
        return make_key(ledger, variable, args)

    def get_var(self, ledger, variable, arguments=()):
        key = self.make_key(ledger, variable, arguments)
        return self.get(key)

    def set_var(self, ledger, variable, arguments=(), value=None):
        key = self.make_key(ledger, variable, arguments)
        self.set(key, value)

    def flush(self):
        self.driver.flush()
        self.clear_pending_state()
