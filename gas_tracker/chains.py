# chains.py
# Build the chain dropdown options once per session.

import logging
from dataclasses import dataclass

import pandas as pd

from .fetch_covalent import get_all_chains

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChainOption:
    name: str
    logo_url: str


def filter_mainnets(df: pd.DataFrame) -> pd.DataFrame:
    """
    Drop rows flagged is_testnet == True. Anything else (False, missing) stays.
    Provider order is kept.
    """
    if df.empty:
        return df
    return df[~df["is_testnet"].eq(True)]


def load_chain_options(api_key):
    """
    Fetch the chain list with the default key and turn it into ChainOptions.
    Any failure is logged and gives an empty list; the page stays usable.
    """
    if not api_key:
        logger.error("No default Covalent API key configured; chain list left empty")
        return []

    try:
        envelope, df = get_all_chains(api_key)
    except Exception:
        logger.exception("Failed to fetch chain list from Covalent")
        return []

    if envelope["error"]:
        logger.error(
            "Covalent refused chain list request (%s): %s",
            envelope["error_code"],
            envelope["error_message"],
        )
        return []

    df = filter_mainnets(df)
    return [
        ChainOption(
            name=row["name"],
            logo_url=row["logo_url"] if pd.notna(row["logo_url"]) else "",
        )
        for _, row in df.iterrows()
        if pd.notna(row["name"]) and row["name"]
    ]
