# config.py
# Central place for endpoints, labels, and defaults the rest of the app uses.

import os

import streamlit as st

# Covalent unified API.
COVALENT_API_URL = "https://api.covalenthq.com/v1"
REGISTER_URL = "https://www.covalenthq.com/platform/auth/register/"

# Default key, only used to populate the chain dropdown on first load.
# Users type their own key into the form for the gas price lookup.
# Read from env first, then .streamlit/secrets.toml.
DEFAULT_API_KEY_ENV = "COVALENT_API_KEY"

LOG_LEVEL_ENV = "GAS_TRACKER_LOG_LEVEL"

REQUEST_TIMEOUT = 30  # seconds
QUOTE_CURRENCY = "USD"

# Shown in each result card before the first lookup and after any failure.
PLACEHOLDER_RESULT = ["$", "$", "$"]

# Event types the gas_prices endpoint understands, with the label shown in the dropdown.
EVENTS = [
    {"name": "ERC-20 Transfer", "value": "erc20"},
    {"name": "Native Token Transfer", "value": "nativetokens"},
    {"name": "Uniswap V3 Swap", "value": "uniswapv3"},
]

UNAUTHORIZED_ERROR_CODE = 401


def _from_secrets(name):
    try:
        value = st.secrets.get(name)
    except FileNotFoundError:
        # no secrets.toml anywhere
        return None
    return value if isinstance(value, str) else None


def get_default_api_key():
    """
    Key from env or streamlit secrets, or None if unset/blank.
    """
    key = os.getenv(DEFAULT_API_KEY_ENV, "").strip()
    if not key:
        key = (_from_secrets(DEFAULT_API_KEY_ENV) or "").strip()
    return key or None


def get_log_level():
    return os.getenv(LOG_LEVEL_ENV, "INFO").upper()
