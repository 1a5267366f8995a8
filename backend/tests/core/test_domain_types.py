"""Domain Types — verifies identity wrappers, FlashLevel, and Flash immutability.

Tests:
    - NewType wrappers are plain strings at runtime
    - FlashLevel serializes to its CSS modifier string
    - Flash is frozen
"""

import dataclasses

import pytest

from minisite.core.domain_types import CsrfToken, Flash, FlashLevel, SessionId


def test_identity_types_wrap_str():
    assert SessionId("abc") == "abc"
    assert CsrfToken("f00d") == "f00d"


def test_flash_level_values():
    assert FlashLevel.SUCCESS.value == "success"
    assert FlashLevel.ERROR.value == "error"
    assert len(FlashLevel) == 2


def test_flash_level_is_str():
    assert isinstance(FlashLevel.ERROR, str)


def test_flash_is_immutable():
    flash = Flash(FlashLevel.SUCCESS, "hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        flash.text = "changed"
