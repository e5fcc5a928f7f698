# fetch_covalent.py
# Responsible for talking to the Covalent API.
# Two calls only: the list of supported chains, and gas prices for a chain/event pair.
# Network errors are left to the caller. Anything we get back that isn't the
# usual JSON envelope is raised as CovalentResponseError.

import logging

import pandas as pd
import requests

from . import config

logger = logging.getLogger(__name__)

CHAIN_COLUMNS = ["name", "chain_id", "is_testnet", "label", "logo_url"]


class CovalentError(Exception):
    """Base class for failures talking to Covalent."""


class CovalentResponseError(CovalentError):
    """Covalent answered, but not with something we can read."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def _headers(api_key: str):
    return {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }


def _get_envelope(path: str, api_key: str, params=None):
    """
    GET {COVALENT_API_URL}{path} and return the decoded envelope, which is
    always a dict with at least "error", "error_code", "error_message", "data".

    Covalent reports auth/quota problems as a JSON envelope with an HTTP
    error status, so we don't raise_for_status() here. If an error status
    comes back without an envelope, we build one from the status code.
    """
    url = f"{config.COVALENT_API_URL}{path}"
    resp = requests.get(
        url,
        headers=_headers(api_key),
        params=params,
        timeout=config.REQUEST_TIMEOUT,
    )

    try:
        body = resp.json()
    except ValueError as e:
        if resp.status_code >= 400:
            return {
                "data": None,
                "error": True,
                "error_code": resp.status_code,
                "error_message": resp.reason or f"HTTP {resp.status_code}",
            }
        raise CovalentResponseError(
            f"Non-JSON response from {path}: {e}", status_code=resp.status_code
        ) from e

    if not isinstance(body, dict):
        raise CovalentResponseError(
            f"Unexpected response shape from {path}", status_code=resp.status_code
        )

    if resp.status_code >= 400 and not body.get("error"):
        body = {
            "data": None,
            "error": True,
            "error_code": body.get("error_code") or resp.status_code,
            "error_message": body.get("error_message") or resp.reason,
        }

    body.setdefault("data", None)
    body.setdefault("error", False)
    body.setdefault("error_code", None)
    body.setdefault("error_message", None)

    if not body["error"] and not isinstance(body["data"], dict):
        raise CovalentResponseError(
            f"Missing data in response from {path}", status_code=resp.status_code
        )

    return body


def get_all_chains(api_key: str):
    """
    Fetch every chain Covalent supports.

    Returns (envelope, DataFrame). On an error envelope the DataFrame is
    empty. Columns we always guarantee:
    - name       (chain identifier used in other endpoints, ex: "eth-mainnet")
    - chain_id
    - is_testnet
    - label      (human name)
    - logo_url
    """
    envelope = _get_envelope("/chains/", api_key)

    if envelope["error"]:
        return envelope, pd.DataFrame([], columns=CHAIN_COLUMNS)

    items = envelope["data"].get("items") or []
    df = pd.DataFrame(items)
    for col in CHAIN_COLUMNS:
        if col not in df.columns:
            df[col] = None

    logger.debug("Fetched %d chains from Covalent", len(df))
    return envelope, df


def get_gas_prices(api_key: str, chain: str, event: str):
    """
    Fetch recent gas price samples for `event` on `chain`.

    Returns the envelope as-is. On success envelope["data"]["items"] is an
    ordered list of samples, each with (not exhaustive):
    - interval               (ex: "1minute")
    - gas_price
    - total_gas_quote
    - pretty_total_gas_quote (ex: "$0.42")

    Raises CovalentResponseError if a success body doesn't carry a list of
    sample objects.
    """
    path = f"/{chain}/event/{event}/gas_prices/"
    envelope = _get_envelope(
        path,
        api_key,
        params={"quote-currency": config.QUOTE_CURRENCY},
    )

    if not envelope["error"]:
        items = envelope["data"].get("items")
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            raise CovalentResponseError(f"Malformed gas price items from {path}")

    return envelope
