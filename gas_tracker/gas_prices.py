# gas_prices.py
# What happens when the user hits "Get gas price".
# Works on a plain mutable mapping so the page can hand in st.session_state
# and tests can hand in a dict.

import logging

from . import config
from .fetch_covalent import get_gas_prices
from .validation import validate_form

logger = logging.getLogger(__name__)

WRONG_KEY_TITLE = "Wrong API Key"
WRONG_KEY_DESCRIPTION = "Are you sure that you use the right api key ?"
GENERIC_FAILURE_TITLE = "Opps something went wrong!"
GENERIC_FAILURE_DESCRIPTION = "Try again in a few minutes"

# Session keys of the form widgets.
API_KEY_FIELD = "form_api_key"
CHAIN_FIELD = "form_chain"
EVENT_FIELD = "form_event"


def init_state(state):
    """Seed the keys the page relies on, leaving existing values alone."""
    state.setdefault("chains", None)
    state.setdefault("result", list(config.PLACEHOLDER_RESULT))
    state.setdefault("intervals", [None] * len(config.PLACEHOLDER_RESULT))
    state.setdefault("loading", False)
    state.setdefault("pending", None)
    state.setdefault("form_errors", {})
    state.setdefault("notices", [])


def reset_result(state):
    state["result"] = list(config.PLACEHOLDER_RESULT)
    state["intervals"] = [None] * len(config.PLACEHOLDER_RESULT)


def queue_submission(state):
    """
    Submit-button callback. Runs before the next script run, so a valid
    form flips `loading` on in time for the inputs to render disabled.
    The lookup itself is left in state["pending"] for that run to perform.
    """
    form, errors = validate_form(
        state.get(API_KEY_FIELD), state.get(CHAIN_FIELD), state.get(EVENT_FIELD)
    )
    state["form_errors"] = errors
    if form is None:
        return
    state["pending"] = form
    state["loading"] = True


def take_pending(state):
    """Return the queued FormInput (or None) and clear it."""
    form = state.get("pending")
    state["pending"] = None
    return form


def queue_notice(state, title, description):
    state["notices"] = state.get("notices", []) + [(title, description)]


def take_notices(state):
    notices = state.get("notices", [])
    state["notices"] = []
    return notices


def submit_gas_request(form, state, notify):
    """
    Fetch gas prices for a validated FormInput and update `state`.

    notify(title, description) is called for a wrong key (401) and for
    anything unexpected (network down, garbage body). Other provider error
    codes only get logged. Results are reset before notify is called, and
    state["loading"] is back to False however this exits.
    """
    state["loading"] = True
    try:
        try:
            envelope = get_gas_prices(form.api_key, form.chain, form.event)
            if not envelope["error"]:
                items = envelope["data"]["items"]
                quotes = [item.get("pretty_total_gas_quote") for item in items]
                intervals = [item.get("interval") for item in items]
        except Exception:
            logger.exception(
                "Gas price request failed for chain=%s event=%s", form.chain, form.event
            )
            reset_result(state)
            notify(GENERIC_FAILURE_TITLE, GENERIC_FAILURE_DESCRIPTION)
            return

        if not envelope["error"]:
            state["result"] = quotes
            state["intervals"] = intervals
            return

        reset_result(state)
        if envelope["error_code"] == config.UNAUTHORIZED_ERROR_CODE:
            logger.info("Rejected API key for gas price request")
            notify(WRONG_KEY_TITLE, WRONG_KEY_DESCRIPTION)
        else:
            logger.warning(
                "Covalent returned error %s for chain=%s event=%s: %s",
                envelope["error_code"],
                form.chain,
                form.event,
                envelope["error_message"],
            )
    finally:
        state["loading"] = False
