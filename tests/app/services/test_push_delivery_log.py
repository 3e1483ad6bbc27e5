"""Testes para app.services.push_delivery_log."""

from __future__ import annotations

import logging

import pytest
from firebase_admin.exceptions import UnavailableError

from app.domain.push import (
    AddressType,
    DispatchContext,
    DispatchResult,
    DispatchStatus,
    PlatformIdentityAddress,
    PushNotification,
)
from app.services import PushDeliveryLogObserver
from utils.errors import UnsupportedRecipientError

_LOGGER = "app.services.push_delivery_log"


def _notification() -> PushNotification:
    return PushNotification(
        title="t",
        body="b",
        recipients=[PlatformIdentityAddress(value="secret-token", type=AddressType.DEVICE_TOKEN)],
    )


class TestPushDeliveryLogObserver:
    """Logs de sucesso e falha."""

    def test_on_dispatched_logs_resource_ids(self, caplog: pytest.LogCaptureFixture) -> None:
        result = DispatchResult(status=DispatchStatus.DISPATCHED, resource_id="msg-1")

        with caplog.at_level(logging.DEBUG, logger=_LOGGER):
            PushDeliveryLogObserver().on_dispatched(DispatchContext(), _notification(), [result])

        record = caplog.records[-1]
        assert record.getMessage() == "push_dispatched"
        assert record.resource_ids == ["msg-1"]
        assert record.channel_provider_id == "firebase"

    def test_on_error_logs_error_types_without_tokens(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        results = [
            DispatchResult(status=DispatchStatus.EXCEPTION, exception=UnavailableError("x")),
            DispatchResult(status=DispatchStatus.EXCEPTION, exception=UnsupportedRecipientError("y")),
            DispatchResult(status=DispatchStatus.EXCEPTION, exception=UnavailableError("z")),
        ]

        with caplog.at_level(logging.WARNING, logger=_LOGGER):
            PushDeliveryLogObserver().on_error(DispatchContext(), _notification(), results)

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.count == 3
        assert record.error_types == ["UnavailableError", "UnsupportedRecipientError"]
        assert "secret-token" not in caplog.text


class TestDispatchResult:
    """Status de resultado."""

    def test_is_success(self) -> None:
        assert DispatchResult(status=DispatchStatus.DISPATCHED).is_success
        assert not DispatchResult(status=DispatchStatus.EXCEPTION).is_success
        assert DispatchStatus.DISPATCHED.is_success()
