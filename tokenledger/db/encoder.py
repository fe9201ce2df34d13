import json
from tokenledger.config import INDEX_SEPARATOR, DELIMITER

MONGO_MIN_INT = -(2 ** 63)
MONGO_MAX_INT = 2 ** 63 - 1

##
# ENCODER CLASS
# Add to this to encode Python types for storage.
# Amounts are 128-bit and overflow the 8 byte integers most stores accept, so they are
# tagged as strings. Byte identities are tagged as hex.
##


class Encoder(json.JSONEncoder):
    def default(self, o, *args):
        if isinstance(o, bytes):
            return {
                '__bytes__': o.hex()
            }
        return super().default(o)


def encode_int(value: int):
    if MONGO_MIN_INT < value < MONGO_MAX_INT:
        return value

    return {
        '__big_int__': str(value)
    }


def encode_ints(data):
    if isinstance(data, bool):
        return data
    elif isinstance(data, int):
        return encode_int(data)
    elif isinstance(data, dict):
        return {k: encode_ints(v) for k, v in data.items()}
    elif isinstance(data, (list, tuple)):
        return [encode_ints(i) for i in data]
    return data


def encode(data):
    """ NOTE:
    Normally encoding behavior is overriden in 'default' method inside
    a class derived from json.JSONEncoder. Unfortunately this can be done only
    for custom types, and int is not one of them.
    """
    return json.dumps(encode_ints(data), cls=Encoder, separators=(',', ':'))


def as_object(d):
    if '__bytes__' in d:
        return bytes.fromhex(d['__bytes__'])
    elif '__big_int__' in d:
        return int(d['__big_int__'])
    return dict(d)


# Decode has a hook for JSON objects, which are just Python dictionaries. You have to specify the logic in this hook.
def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None


def make_key(ledger, variable, args=()):
    ledger_variable = INDEX_SEPARATOR.join((ledger, variable))
    if args:
        return DELIMITER.join((ledger_variable, *[str(arg) for arg in args]))
    return ledger_variable


