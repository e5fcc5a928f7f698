# formatting.py
# Functions to turn provider values into human-readable labels for the page.
# This should ONLY do presentation formatting. No fetching or state changes.

import re

from . import config

DEFAULT_CARD_TITLE = "Gas Price 1 Minute Average"


def event_label(value):
    """
    'erc20' -> 'ERC-20 Transfer'. Unknown values come back unchanged.
    """
    for event in config.EVENTS:
        if event["value"] == value:
            return event["name"]
    return value


def event_values():
    return [event["value"] for event in config.EVENTS]


def _format_interval(interval):
    """
    Turn '1minute' into '1 Minute', '30minutes' into '30 Minutes'.
    Returns None if it doesn't look like <number><unit>.
    """
    if not isinstance(interval, str):
        return None
    match = re.fullmatch(r"\s*(\d+)\s*([a-zA-Z]+)\s*", interval)
    if not match:
        return None
    amount, unit = match.groups()
    return f"{amount} {unit.capitalize()}"


def card_title(interval):
    """
    Caption for a result card. Falls back to the 1 minute title when the
    provider didn't tell us the interval (or before the first lookup).
    """
    pretty = _format_interval(interval)
    if pretty is None:
        return DEFAULT_CARD_TITLE
    return f"Gas Price {pretty} Average"


def chain_label(name):
    """
    'eth-mainnet' -> 'Eth Mainnet'. Good enough for a dropdown.
    """
    if not name:
        return ""
    return " ".join(part.capitalize() for part in name.replace("_", "-").split("-") if part)
