# validation.py
# Field rules for the lookup form. Returns either a FormInput or per-field messages.

from dataclasses import dataclass

API_KEY_REQUIRED = "API Key is required"
CHAIN_REQUIRED = "Please select one of the chain that available"
EVENT_REQUIRED = "Please select one of the events that available"


@dataclass(frozen=True)
class FormInput:
    api_key: str
    chain: str
    event: str


def validate_form(api_key, chain, event):
    """
    Check the three form fields.

    Returns (form_input, errors). Exactly one of them is meaningful:
    form_input is None when errors is non-empty, and errors is {} when
    form_input is set. errors is keyed by field name ("api_key", "chain", "event").
    """
    errors = {}

    if not isinstance(api_key, str) or len(api_key) < 1:
        errors["api_key"] = API_KEY_REQUIRED
    if not chain:
        errors["chain"] = CHAIN_REQUIRED
    if not event:
        errors["event"] = EVENT_REQUIRED

    if errors:
        return None, errors
    return FormInput(api_key=api_key, chain=chain, event=event), {}
