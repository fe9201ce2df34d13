"""Module for initializing settings related to the built-in ledger logger
Functions:
-get_logger
-overwrite_logger_level"""

import logging, coloredlogs
import os

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
_LOG_LVL = os.getenv('LOG_LEVEL', None)
if _LOG_LVL == 'OFF':
    _LOG_LVL = -1
elif _LOG_LVL:
    assert _LOG_LVL in VALID_LVLS, "Log level {} not in valid levels {}".format(_LOG_LVL, VALID_LVLS)
    _LOG_LVL = getattr(logging, _LOG_LVL)
else:
    _LOG_LVL = logging.INFO

ROOT_NAME = 'tokenledger'

format = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)-2s %(message)s'.format(
    os.getenv('HOST_NAME', 'Ledger'))

"""
Custom Styling
"""

coloredlogs.DEFAULT_LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}
coloredlogs.DEFAULT_FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'hostname': {'color': 'magenta'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
    'programname': {'color': 'cyan'}
}


class ColoredStreamHandler(logging.StreamHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(
            coloredlogs.ColoredFormatter(format)
        )


def _ignore(*args, **kwargs):
    pass


class MockLogger:
    def __getattr__(self, item):
        return _ignore


def _configure_root():
    root = logging.getLogger(ROOT_NAME)
    if root.handlers:
        return root

    root.addHandler(ColoredStreamHandler())

    log_file = os.getenv('LOG_FILE')
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.isdir(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        handler = logging.FileHandler(log_file, delay=True)
        handler.setFormatter(logging.Formatter(format))
        root.addHandler(handler)

    root.setLevel(_LOG_LVL)
    return root


def get_logger(name=''):
    if _LOG_LVL < 0:
        return MockLogger()

    _configure_root()

    return logging.getLogger('{}.{}'.format(ROOT_NAME, name) if name else ROOT_NAME)


def overwrite_logger_level(level):
    global _LOG_LVL
    _LOG_LVL = level

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name == ROOT_NAME or name.startswith(ROOT_NAME + '.'):
            logging.getLogger(name).setLevel(level)
