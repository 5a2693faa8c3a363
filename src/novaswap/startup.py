import logging
import logging.config
import os
import warnings

import yaml

from . import configs
from .client import LCDClient

_LOGGING_CONFIG_FILE = os.path.join(os.path.dirname(__file__), "logging_config.yaml")


def setup_warnings():
    warnings.simplefilter(action="ignore", category=FutureWarning)
    warnings.simplefilter(action="ignore", category=DeprecationWarning, append=True)


def get_logging_config(
    log_file: str = None,
    log_stdout: bool = None,
    min_log_level: str = None,
) -> dict:
    log_file = configs.LOG_FILE if log_file is None else log_file
    log_stdout = configs.LOG_STDOUT if log_stdout is None else log_stdout
    min_log_level = configs.MIN_LOG_LEVEL if min_log_level is None else min_log_level

    with open(_LOGGING_CONFIG_FILE) as f:
        dict_config = yaml.safe_load(f)
    dict_config["handlers"]["logfile"]["filename"] = log_file

    if not log_stdout:
        del dict_config["handlers"]["console"]
        dict_config["root"]["handlers"].remove("console")

    for handler in dict_config["handlers"].values():
        handler["level"] = max(
            logging.getLevelName(min_log_level), logging.getLevelName(handler["level"])
        )
    return dict_config


def setup_logger(**kwargs):
    dict_config = get_logging_config(**kwargs)
    log_dir = os.path.dirname(dict_config["handlers"]["logfile"]["filename"])
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    logging.config.dictConfig(dict_config)


def setup(**kwargs):
    setup_warnings()
    setup_logger(**kwargs)


def get_client(mnemonic: str = None) -> LCDClient:
    return LCDClient(
        lcd_uri=configs.LCD_URI,
        chain_id=configs.CHAIN_ID,
        mnemonic=configs.MNEMONIC if mnemonic is None else mnemonic,
        fee_denom=configs.BASE_DENOM,
        gas_price=configs.GAS_PRICE,
        default_gas_limit=configs.DEFAULT_GAS_LIMIT,
        address_prefix=configs.ADDRESS_PREFIX,
        coin_type=configs.COIN_TYPE,
    )
