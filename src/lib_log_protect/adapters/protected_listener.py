"""Listener that redacts sensitive fields of financial messages in log events.

Purpose
-------
Rewrite the payload of a :class:`LogEvent` so protected fields are masked and
wiped fields replaced by a sentinel before persistence listeners see them.

Contents
--------
* :class:`ProtectedLogListener` - the redaction filter.
* :data:`WIPED` - sentinel written into wiped fields.

System Role
-----------
Registered in a :class:`~lib_log_protect.application.use_cases.LogDispatcher`
*before* any listener that persists events. Example wiring::

    dispatcher = LogDispatcher()
    dispatcher.add_listener(ProtectedLogListener.from_configuration(
        MappingConfiguration({"protect": "2 35 45 55", "wipe": "48"})
    ))
    dispatcher.add_listener(file_listener)

Listeners registered earlier in the chain receive the cleartext event.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_log_protect.application.ports import ConfigurationPort, FinancialMessagePort, MaskPolicyPort
from lib_log_protect.domain.errors import ConfigurationError, MessageFormatError
from lib_log_protect.domain.events import LogEvent
from lib_log_protect.domain.fields import FieldSelector

from .masking import create_mask_policy

logger = logging.getLogger(__name__)

WIPED = "[WIPED]"


def _is_message(item: object) -> bool:
    return not isinstance(item, type) and isinstance(item, FinancialMessagePort)


class ProtectedLogListener:
    """Mask ``protect`` fields and wipe ``wipe`` fields of every message in an event.

    Each message is cloned before redaction so producers holding the original
    keep their cleartext values. The wipe pass runs after the mask pass, so a
    field listed under both ends up as :data:`WIPED`.

    Instances are safe to share between threads: the field selection and mask
    policy are immutable once configured and all mutation happens on the event
    passed to :meth:`process`.

    Examples
    --------
    >>> from lib_log_protect.adapters.configuration import MappingConfiguration
    >>> from lib_log_protect.domain.message import IsoMessage
    >>> listener = ProtectedLogListener.from_configuration(MappingConfiguration({"protect": "2", "wipe": "35"}))
    >>> original = IsoMessage({0: "0200", 2: "4111111111111111", 35: "41111111=2512101"})
    >>> event = listener.process(LogEvent(payload=[original]))
    >>> event.payload[0].to_dict()
    {'0': '0200', '2': '________________', '35': '[WIPED]'}
    >>> original.get_field(2)
    '4111111111111111'
    """

    redacts_payload = True

    def __init__(self, *, mask_policy: MaskPolicyPort | None = None) -> None:
        self._fixed_policy = mask_policy
        self._active: tuple[FieldSelector, MaskPolicyPort] | None = None
        self._configuration: ConfigurationPort | None = None

    @classmethod
    def from_configuration(
        cls,
        configuration: ConfigurationPort,
        *,
        mask_policy: MaskPolicyPort | None = None,
    ) -> "ProtectedLogListener":
        listener = cls(mask_policy=mask_policy)
        listener.configure(configuration)
        return listener

    @property
    def selector(self) -> FieldSelector:
        """Active field selection; raises :class:`ConfigurationError` before :meth:`configure`."""

        return self._require_active()[0]

    @property
    def mask_policy(self) -> MaskPolicyPort | None:
        if self._active is None:
            return self._fixed_policy
        return self._active[1]

    @property
    def configuration(self) -> ConfigurationPort | None:
        return self._configuration

    def configure(self, configuration: ConfigurationPort) -> None:
        """Parse ``protect``, ``wipe`` and ``mask`` from ``configuration``.

        Both field lists are replaced as a whole; nothing is merged with a
        previous configuration. On error the listener keeps its prior state.

        Raises
        ------
        ConfigurationError
            When a field list holds a token that is not a non-negative integer
            or ``mask`` names an unknown policy.
        """

        selector = FieldSelector.from_text(
            protect=configuration.get("protect", ""),
            wipe=configuration.get("wipe", ""),
        )
        if self._fixed_policy is not None:
            policy = self._fixed_policy
        else:
            policy = create_mask_policy(configuration.get("mask", ""))
        self._configuration = configuration
        self._active = (selector, policy)
        logger.debug("configured protect=%s wipe=%s mask=%r", selector.protect, selector.wipe, policy)

    def log(self, event: LogEvent) -> LogEvent:
        """Listener-chain entry point; alias of :meth:`process`."""

        return self.process(event)

    def process(self, event: LogEvent) -> LogEvent:
        """Replace every financial message in ``event.payload`` by a redacted clone.

        Message-format failures are recorded with :meth:`LogEvent.add_error`
        and never raised; the same event instance is returned.
        Items that only look like messages (a message class, a mock) and fail
        with ``TypeError`` or ``AttributeError`` stay in place unchanged.
        """

        if event is None:
            raise TypeError("event must not be None")
        selector, policy = self._require_active()
        with event.lock:
            payload = event.payload
            for index, item in enumerate(payload):
                if not _is_message(item):
                    continue
                try:
                    payload[index] = self._redact(item, selector, policy, event)
                except (TypeError, AttributeError) as exc:
                    logger.warning(
                        "payload item %d (%s) is not a usable message; left untouched: %s",
                        index,
                        type(item).__name__,
                        type(exc).__name__,
                    )
        return event

    def _redact(
        self,
        message: FinancialMessagePort,
        selector: FieldSelector,
        policy: MaskPolicyPort,
        event: LogEvent,
    ) -> Any:
        try:
            clone = message.clone()
        except MessageFormatError as exc:
            self._record(event, exc, None)
            return WIPED
        for number in selector.protect:
            try:
                if clone.has_field(number):
                    clone.set_field(number, policy.mask(clone.get_field(number)))
            except MessageFormatError as exc:
                self._record(event, exc, number)
        for number in selector.wipe:
            try:
                if clone.has_field(number):
                    clone.set_field(number, WIPED)
            except MessageFormatError as exc:
                self._record(event, exc, number)
        return clone

    def _require_active(self) -> tuple[FieldSelector, MaskPolicyPort]:
        if self._active is None:
            raise ConfigurationError("ProtectedLogListener used before configure()")
        return self._active

    @staticmethod
    def _record(event: LogEvent, error: MessageFormatError, number: int | None) -> None:
        event.add_error(error)
        if number is None:
            logger.warning("could not clone message for redaction; replaced by %s: %s", WIPED, error)
        else:
            logger.warning("could not redact field %d: %s", number, error)

    def __repr__(self) -> str:
        selector = None if self._active is None else self._active[0]
        return f"ProtectedLogListener(selector={selector!r}, mask_policy={self.mask_policy!r})"


__all__ = ["ProtectedLogListener", "WIPED"]
