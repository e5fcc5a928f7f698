"""Shared fixtures for the gas tracker test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from gas_tracker.validation import FormInput


def make_response(status_code=200, body=None, reason="OK", json_error=None):
    """Build a stand-in for requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


def error_envelope(code, message="error"):
    return {"data": None, "error": True, "error_code": code, "error_message": message}


# ── Payloads ─────────────────────────────────────────────────────────────


@pytest.fixture
def chains_body() -> dict:
    return {
        "data": {
            "updated_at": "2024-01-01T00:00:00Z",
            "items": [
                {
                    "name": "eth-mainnet",
                    "chain_id": "1",
                    "is_testnet": False,
                    "label": "Ethereum Mainnet",
                    "logo_url": "https://logos.example/eth.svg",
                },
                {
                    "name": "eth-sepolia",
                    "chain_id": "11155111",
                    "is_testnet": True,
                    "label": "Ethereum Sepolia Testnet",
                    "logo_url": "https://logos.example/eth.svg",
                },
                {
                    "name": "matic-mainnet",
                    "chain_id": "137",
                    "is_testnet": False,
                    "label": "Polygon Mainnet",
                    "logo_url": "https://logos.example/matic.svg",
                },
                {
                    "name": "base-mainnet",
                    "chain_id": "8453",
                    "is_testnet": False,
                    "label": "Base Mainnet",
                    "logo_url": "https://logos.example/base.svg",
                },
            ],
        },
        "error": False,
        "error_code": None,
        "error_message": None,
    }


@pytest.fixture
def gas_body() -> dict:
    return {
        "data": {
            "chain_name": "eth-mainnet",
            "event_type": "erc20",
            "quote_currency": "USD",
            "items": [
                {"interval": "1minute", "gas_price": "21000000000", "pretty_total_gas_quote": "$1.12"},
                {"interval": "2minute", "gas_price": "20000000000", "pretty_total_gas_quote": "$1.05"},
                {"interval": "5minute", "gas_price": "19000000000", "pretty_total_gas_quote": "$0.98"},
            ],
        },
        "error": False,
        "error_code": None,
        "error_message": None,
    }


@pytest.fixture
def form_input() -> FormInput:
    return FormInput(api_key="cqt_user_key", chain="eth-mainnet", event="erc20")
