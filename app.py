import logging

import streamlit as st

from gas_tracker import config
from gas_tracker.chains import load_chain_options
from gas_tracker.formatting import card_title, chain_label, event_label, event_values
from gas_tracker.gas_prices import (
    API_KEY_FIELD,
    CHAIN_FIELD,
    EVENT_FIELD,
    init_state,
    queue_notice,
    queue_submission,
    submit_gas_request,
    take_notices,
    take_pending,
)

logging.basicConfig(
    level=config.get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("gas_tracker.app")


# -------------------------
# PAGE SETUP
# -------------------------

st.set_page_config(
    page_title="Gas Price Tracker",
    layout="wide"
)

st.title("Gas Price Tracker")
st.caption("Powered by covalent api")

init_state(st.session_state)

# Chain list is fetched once per browser session, with the default key.
if st.session_state.chains is None:
    st.session_state.chains = load_chain_options(config.get_default_api_key())
    logger.info("Loaded %d chains for dropdown", len(st.session_state.chains))

# Notifications raised by the previous run's lookup.
for title, description in take_notices(st.session_state):
    st.toast(f"**{title}**\n\n{description}", icon="⚠️")

chains = st.session_state.chains
chain_logos = {c.name: c.logo_url for c in chains}
loading = st.session_state.loading
form_errors = st.session_state.form_errors


def notify(title, description):
    # shown at the top of the rerun below
    queue_notice(st.session_state, title, description)


def render_cards(result, intervals, is_loading):
    for value, interval in zip(result, intervals):
        with st.container(border=True):
            # "…" stands in for the skeleton while a request is in flight
            st.metric(
                label=f"💲 {card_title(interval)}",
                value="…" if is_loading else value,
            )


form_col, result_col = st.columns(2)

# -------------------------
# LOOKUP FORM
# -------------------------

with form_col:
    with st.form("gas_price_form"):
        st.text_input(
            "Covalent API Key",
            key=API_KEY_FIELD,
            placeholder="Enter your covalent api key here",
            type="password",
            disabled=loading,
        )
        st.caption(f"Dont have the key ? [register here]({config.REGISTER_URL})")
        if "api_key" in form_errors:
            st.error(form_errors["api_key"])

        st.selectbox(
            "Select Chains",
            options=[c.name for c in chains],
            key=CHAIN_FIELD,
            index=None,
            placeholder="Select Chains",
            format_func=chain_label,
            disabled=loading,
        )
        if "chain" in form_errors:
            st.error(form_errors["chain"])

        st.selectbox(
            "Select Event Type",
            options=event_values(),
            key=EVENT_FIELD,
            index=None,
            placeholder="Select Event",
            format_func=event_label,
            disabled=loading,
        )
        if "event" in form_errors:
            st.error(form_errors["event"])

        st.form_submit_button(
            "Get gas price ➜",
            on_click=queue_submission,
            args=(st.session_state,),
            disabled=loading,
        )

    chain = st.session_state.get(CHAIN_FIELD)
    if chain and chain_logos.get(chain):
        st.image(chain_logos[chain], width=24, caption=chain_label(chain))

# -------------------------
# RESULTS
# -------------------------

with result_col:
    render_cards(st.session_state.result, st.session_state.intervals, loading)

# The submit callback left a validated form behind: the form above is drawn
# disabled, so fetch now and rerun to re-enable it with the new numbers.
pending = take_pending(st.session_state)
if pending is not None:
    with st.spinner("Fetching gas prices..."):
        submit_gas_request(pending, st.session_state, notify)
    st.rerun()
