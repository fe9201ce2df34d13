import os

# Amounts live on a fixed-width unsigned domain
AMOUNT_BITS = 128
MAX_AMOUNT = 2 ** AMOUNT_BITS - 1

DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_HASH_DIMENSIONS = 16
MAX_KEY_SIZE = 1024

LEDGER_NAME = 'ledger'
BALANCES_NAME = 'balances'
ALLOWANCES_NAME = 'allowances'
SUPPLY_NAME = 'total_supply'

# Operations a host may invoke with an implicit caller
EXPORTED_FUNCTIONS = {'approve', 'transfer', 'transfer_from', 'issue', 'burn'}
QUERY_FUNCTIONS = {'total_supply', 'balance_of', 'allowance', 'circulating_supply'}

DB_TYPE = os.getenv('TOKENLEDGER_DB_TYPE', 'memory')
DB_URL = os.getenv('TOKENLEDGER_DB_URL', 'mongodb://localhost:27017')
DB_NAME = os.getenv('TOKENLEDGER_DB_NAME', 'tokenledger')
DB_COLLECTION = os.getenv('TOKENLEDGER_DB_COLLECTION', 'state')

CONTEXT_DEPTH_LIMIT = 1024
