from __future__ import annotations

import pytest

from gkhub import access, config
from gkhub.models import MODE_STUDY_FLASH, MODE_STUDY_PRO, MODE_TEST, PLAN_FREE, PLAN_PREMIUM
from gkhub.store import LocalStateStore

PASSKEYS = ("PREMIUM-KEY", "FREE-KEY")


def test_passkeys_unlock_matching_plans():
    assert access.resolve_passkey("PREMIUM-KEY", PASSKEYS) == PLAN_PREMIUM
    assert access.resolve_passkey("  FREE-KEY ", PASSKEYS) == PLAN_FREE


@pytest.mark.parametrize("passkey", ["", "   ", "free-key", "NOPE", None])
def test_invalid_passkeys_are_rejected(passkey):
    with pytest.raises(access.InvalidPasskeyError) as excinfo:
        access.resolve_passkey(passkey, PASSKEYS)

    assert excinfo.value.message == "Invalid Passkey. Please try again."


def test_default_passkeys_come_from_config(monkeypatch):
    monkeypatch.setattr(config, "get_secret", lambda section, key, env_var=None, default=None: default)

    assert access.resolve_passkey(config.DEFAULT_PREMIUM_PASSKEY) == PLAN_PREMIUM
    assert access.resolve_passkey(config.DEFAULT_FREE_PASSKEY) == PLAN_FREE


def test_unlock_persists_plan(tmp_path):
    store = LocalStateStore("abc", data_dir=tmp_path)

    assert access.unlock_with_passkey(store, "PREMIUM-KEY", PASSKEYS) == PLAN_PREMIUM
    assert LocalStateStore("abc", data_dir=tmp_path).plan == PLAN_PREMIUM


def test_failed_unlock_keeps_plan(tmp_path):
    store = LocalStateStore("abc", data_dir=tmp_path)
    access.activate_free_plan(store)

    with pytest.raises(access.InvalidPasskeyError):
        access.unlock_with_passkey(store, "wrong", PASSKEYS)

    assert store.plan == PLAN_FREE


def test_free_plan_cannot_select_gated_modes():
    assert access.select_mode(PLAN_FREE, MODE_STUDY_FLASH, MODE_STUDY_PRO) == (MODE_STUDY_FLASH, True)
    assert access.select_mode(PLAN_FREE, MODE_STUDY_FLASH, MODE_TEST) == (MODE_STUDY_FLASH, True)
    assert access.select_mode(PLAN_FREE, MODE_STUDY_FLASH, MODE_STUDY_FLASH) == (MODE_STUDY_FLASH, False)


def test_premium_plan_selects_any_mode():
    assert access.select_mode(PLAN_PREMIUM, MODE_STUDY_FLASH, MODE_TEST) == (MODE_TEST, False)
    assert access.select_mode(PLAN_PREMIUM, MODE_TEST, MODE_STUDY_PRO) == (MODE_STUDY_PRO, False)


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        access.select_mode(PLAN_PREMIUM, MODE_TEST, "quiz")


def test_syllabus_is_a_premium_feature():
    assert not access.has_feature(PLAN_FREE, "syllabus")
    assert access.has_feature(PLAN_PREMIUM, "syllabus")


def test_free_unlock_resets_mode():
    assert access.mode_after_unlock(PLAN_FREE, MODE_TEST) == MODE_STUDY_FLASH
    assert access.mode_after_unlock(PLAN_PREMIUM, MODE_TEST) == MODE_TEST


def test_catalogue_has_one_free_and_one_recommended_plan():
    assert sum(1 for plan in access.PLAN_CATALOGUE if plan["is_free"]) == 1
    assert sum(1 for plan in access.PLAN_CATALOGUE if plan["recommended"]) == 1
