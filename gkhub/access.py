import logging

from gkhub import config
from gkhub.models import MODE_STUDY_FLASH, MODE_STUDY_PRO, MODE_TEST, MODES, PLAN_FREE, PLAN_PREMIUM

logger = logging.getLogger(__name__)

# --- PLAN CATALOGUE ---
PLAN_CATALOGUE = [
    {"duration": "Free Plan", "price": "Free", "is_free": True, "recommended": False,
     "features": ["Basic Study Mode", "Topic Selection", "Limited Access"]},
    {"duration": "1 Month", "price": "₹99", "is_free": False, "recommended": False,
     "features": ["Full Premium Access", "Pro Research Mode", "Unlimited Tests"]},
    {"duration": "6 Months", "price": "₹499", "is_free": False, "recommended": True,
     "features": ["Save 15%", "All Premium Features", "Priority Support"]},
    {"duration": "1 Year", "price": "₹999", "is_free": False, "recommended": False,
     "features": ["Best Value", "VIP Access", "Exam Strategy Call"]},
]

PREMIUM_FEATURES = {"pro", "test", "syllabus"}
MODE_FEATURES = {MODE_STUDY_PRO: "pro", MODE_TEST: "test"}

INVALID_PASSKEY_MESSAGE = "Invalid Passkey. Please try again."


class InvalidPasskeyError(ValueError):
    def __init__(self, message=INVALID_PASSKEY_MESSAGE):
        super().__init__(message)
        self.message = message


def resolve_passkey(passkey, passkeys=None):
    """Maps a passkey to the plan it unlocks. Raises InvalidPasskeyError if it matches none."""
    premium_key, free_key = passkeys or config.get_passkeys()
    key = (passkey or "").strip()
    if key and key == premium_key:
        return PLAN_PREMIUM
    if key and key == free_key:
        return PLAN_FREE
    logger.info("Rejected passkey attempt")
    raise InvalidPasskeyError()


def unlock_with_passkey(store, passkey, passkeys=None):
    """Checks the passkey and persists the unlocked plan in the store."""
    plan = resolve_passkey(passkey, passkeys)
    store.set_plan(plan)
    logger.info(f"Unlocked {plan} plan")
    return plan


def activate_free_plan(store):
    store.set_plan(PLAN_FREE)
    logger.info("Activated free plan")
    return PLAN_FREE


def has_feature(plan, feature):
    if feature not in PREMIUM_FEATURES:
        return True
    return plan == PLAN_PREMIUM


def select_mode(plan, current_mode, requested_mode):
    """Returns (mode, needs_upgrade) for a mode change request.

    Gated modes are refused for non-premium plans: the current mode is kept and
    the caller should show the upgrade prompt.
    """
    if requested_mode not in MODES:
        raise ValueError(f"Unknown mode: {requested_mode}")
    feature = MODE_FEATURES.get(requested_mode)
    if feature and not has_feature(plan, feature):
        return current_mode, True
    return requested_mode, False


def mode_after_unlock(plan, current_mode):
    """Free plans are always dropped back to the fast study mode."""
    if plan == PLAN_FREE:
        return MODE_STUDY_FLASH
    return current_mode
