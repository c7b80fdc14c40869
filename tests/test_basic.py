"""Façade helpers: metadata banner and ready-made listener chains."""

from __future__ import annotations

import pytest

from lib_log_protect import (
    WIPED,
    ConfigurationError,
    IsoMessage,
    LogEvent,
    MappingConfiguration,
    PanTruncationMask,
    RecordingListener,
    RedactionFilter,
    ProtectedLogListener,
    build_dispatcher,
    redact_message,
    summary_info,
)


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_log_protect" in summary
    assert "version" in summary
    assert summary.endswith("\n")
    assert summary_info() == summary


def test_redaction_filter_alias() -> None:
    assert RedactionFilter is ProtectedLogListener


def test_build_dispatcher_places_protector_first() -> None:
    recorder = RecordingListener()
    dispatcher = build_dispatcher(MappingConfiguration({"protect": "2"}), sinks=[recorder])
    assert isinstance(dispatcher.listeners[0], ProtectedLogListener)
    assert dispatcher.listeners[1] is recorder


def test_build_dispatcher_reads_environment_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_PROTECT_WIPE", "2")
    monkeypatch.delenv("LOG_PROTECT_PROTECT", raising=False)
    monkeypatch.delenv("LOG_PROTECT_MASK", raising=False)
    recorder = RecordingListener()
    build_dispatcher(sinks=[recorder]).dispatch(LogEvent(payload=[IsoMessage({2: "4111111111111111"})]))
    assert recorder.snapshot()[0].payload[0].get_field(2) == WIPED


def test_build_dispatcher_refuses_invalid_configuration() -> None:
    with pytest.raises(ConfigurationError):
        build_dispatcher(MappingConfiguration({"wipe": "35 forty"}))


def test_redact_message_returns_clone_and_errors() -> None:
    original = IsoMessage({0: "0200", 2: "4111111111111111", 35: "41111111=2512101"})
    result = redact_message(original, MappingConfiguration({"protect": "2", "wipe": "35"}), mask_policy=PanTruncationMask())
    assert result.message is not None
    assert result.message.to_dict() == {"0": "0200", "2": "411111______1111", "35": WIPED}
    assert result.errors == []
    assert original.get_field(2) == "4111111111111111"
