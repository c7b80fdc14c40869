from __future__ import annotations

from typing import Callable

import pytest

from lib_log_protect.adapters.configuration import MappingConfiguration
from lib_log_protect.adapters.protected_listener import ProtectedLogListener
from lib_log_protect.domain.errors import MessageFormatError
from lib_log_protect.domain.message import IsoMessage


class FaultyMessage(IsoMessage):
    """IsoMessage whose access to selected fields fails like a broken packager."""

    __slots__ = ("failing",)

    def __init__(self, fields: dict[int, str] | None = None, *, failing: frozenset[int] = frozenset()) -> None:
        super().__init__(fields)
        self.failing = failing

    def get_field(self, number: int) -> str:
        if number in self.failing:
            raise MessageFormatError(f"cannot unpack field {number}", field=number)
        return super().get_field(number)

    def clone(self) -> "FaultyMessage":
        return FaultyMessage(dict(self.fields), failing=self.failing)


class UncloneableMessage(IsoMessage):
    __slots__ = ()

    def clone(self) -> IsoMessage:
        raise MessageFormatError("clone failed")


@pytest.fixture
def scenario_message() -> IsoMessage:
    return IsoMessage(
        {0: "0200", 2: "4111111111111111", 35: "41111111=2512101", 48: "additional data", 41: "TERM0001"}
    )


@pytest.fixture
def make_listener() -> Callable[..., ProtectedLogListener]:
    def _make(protect: str = "", wipe: str = "", **extra: str) -> ProtectedLogListener:
        return ProtectedLogListener.from_configuration(MappingConfiguration({"protect": protect, "wipe": wipe, **extra}))

    return _make


@pytest.fixture
def faulty_message() -> Callable[..., FaultyMessage]:
    def _make(fields: dict[int, str], *failing: int) -> FaultyMessage:
        return FaultyMessage(fields, failing=frozenset(failing))

    return _make


@pytest.fixture
def uncloneable_message() -> IsoMessage:
    return UncloneableMessage({0: "0200", 2: "4111111111111111"})
