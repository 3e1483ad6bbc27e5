"""Testes para api.connectors.firebase.dispatcher.

O envio real (messaging.send_each) é substituído por um fake síncrono;
o app é injetado para não tocar no registro global.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any

import pytest
from firebase_admin import messaging
from firebase_admin.exceptions import FirebaseError, UnavailableError

from api.connectors.firebase import dispatcher as dispatcher_module
from api.connectors.firebase.dispatcher import MAX_BATCH_SIZE, FirebasePushDispatcher
from api.connectors.firebase.options import FirebaseOptions
from app.domain.push import (
    AddressType,
    DispatchContext,
    DispatchStatus,
    PlatformIdentityAddress,
    PushNotification,
)
from utils.errors import UnsupportedRecipientError

_APP = object()


class _FakeSendEach:
    """Registra lotes enviados e responde conforme `failing_tokens`."""

    def __init__(self, failing_tokens: set[str] | None = None) -> None:
        self.failing_tokens = failing_tokens or set()
        self.batches: list[list[messaging.Message]] = []
        self.apps: list[object] = []

    def __call__(self, messages: list[messaging.Message], app: object = None) -> Any:
        self.batches.append(list(messages))
        self.apps.append(app)
        responses = []
        for index, message in enumerate(messages):
            target = message.token or message.topic
            if target in self.failing_tokens:
                responses.append(
                    SimpleNamespace(
                        success=False,
                        message_id=None,
                        exception=UnavailableError("indisponível"),
                    )
                )
            else:
                responses.append(
                    SimpleNamespace(
                        success=True,
                        message_id=f"projects/demo/messages/{len(self.batches)}-{index}",
                        exception=None,
                    )
                )
        return SimpleNamespace(responses=responses)


@dataclass
class _RecordingObserver:
    dispatched: list[Any] = field(default_factory=list)
    errors: list[Any] = field(default_factory=list)

    def on_dispatched(self, context: Any, notification: Any, results: Any) -> None:
        self.dispatched.append(list(results))

    def on_error(self, context: Any, notification: Any, results: Any) -> None:
        self.errors.append(list(results))


def _device(token: str) -> PlatformIdentityAddress:
    return PlatformIdentityAddress(value=token, type=AddressType.DEVICE_TOKEN)


def _notification(*recipients: PlatformIdentityAddress) -> PushNotification:
    return PushNotification(title="Olá", body="Mensagem", recipients=list(recipients))


def _dispatcher(
    monkeypatch: pytest.MonkeyPatch,
    fake: _FakeSendEach,
    observers: tuple[Any, ...] = (),
) -> FirebasePushDispatcher:
    monkeypatch.setattr(dispatcher_module.messaging, "send_each", fake)
    return FirebasePushDispatcher(FirebaseOptions(app_name="test"), observers=observers, app=_APP)


class TestDispatch:
    """Fluxo de envio."""

    @pytest.mark.asyncio
    async def test_sends_one_message_per_recipient_with_shared_data(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        fake = _FakeSendEach()
        dispatcher = _dispatcher(monkeypatch, fake)
        guid = uuid.uuid4()
        context = DispatchContext(content_model={"Type": "Recipients", "Data": {"Guid": guid}, "trx": "x"})

        results = await dispatcher.dispatch(
            _notification(_device("d1"), PlatformIdentityAddress(value="news", type=AddressType.TOPIC)),
            context,
        )

        assert len(fake.batches) == 1
        sent = fake.batches[0]
        assert [message.token for message in sent] == ["d1", None]
        assert [message.topic for message in sent] == [None, "news"]
        assert all(message.data == {"Type": "Recipients", "Data.Guid": str(guid)} for message in sent)
        assert fake.apps == [_APP]
        assert [result.status for result in results] == [DispatchStatus.DISPATCHED] * 2
        assert results[0].resource_id == "projects/demo/messages/1-0"
        assert results[0].channel_provider_id == "firebase"

    @pytest.mark.asyncio
    async def test_data_omitted_when_content_model_is_empty(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        fake = _FakeSendEach()
        dispatcher = _dispatcher(monkeypatch, fake)

        await dispatcher.dispatch(_notification(_device("d1")), DispatchContext(content_model=None))

        assert fake.batches[0][0].data is None

    @pytest.mark.asyncio
    async def test_no_recipients_does_not_call_fcm(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake = _FakeSendEach()
        dispatcher = _dispatcher(monkeypatch, fake)

        results = await dispatcher.dispatch(_notification(), DispatchContext())

        assert results == []
        assert fake.batches == []

    @pytest.mark.asyncio
    async def test_splits_batches_at_fcm_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake = _FakeSendEach()
        dispatcher = _dispatcher(monkeypatch, fake)
        recipients = [_device(f"d{index}") for index in range(MAX_BATCH_SIZE + 3)]

        results = await dispatcher.dispatch(_notification(*recipients), DispatchContext())

        assert [len(batch) for batch in fake.batches] == [MAX_BATCH_SIZE, 3]
        assert len(results) == MAX_BATCH_SIZE + 3

    @pytest.mark.asyncio
    async def test_translates_failures_and_keeps_recipient_order(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        fake = _FakeSendEach(failing_tokens={"bad"})
        observer = _RecordingObserver()
        dispatcher = _dispatcher(monkeypatch, fake, observers=(observer,))

        results = await dispatcher.dispatch(
            _notification(_device("ok"), _device("bad"), PlatformIdentityAddress(value="x")),
            DispatchContext(),
        )

        assert [result.status for result in results] == [
            DispatchStatus.DISPATCHED,
            DispatchStatus.EXCEPTION,
            DispatchStatus.EXCEPTION,
        ]
        assert isinstance(results[1].exception, UnavailableError)
        assert isinstance(results[2].exception, UnsupportedRecipientError)
        assert results[1].resource_id is None
        # Destinatário sem tipo não é enviado
        assert len(fake.batches[0]) == 2

        assert len(observer.dispatched) == 1
        assert len(observer.dispatched[0]) == 1
        assert len(observer.errors) == 1
        assert len(observer.errors[0]) == 2

    @pytest.mark.asyncio
    async def test_observer_not_notified_without_failures(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        observer = _RecordingObserver()
        dispatcher = _dispatcher(monkeypatch, _FakeSendEach(), observers=(observer,))

        await dispatcher.dispatch(_notification(_device("d1")), DispatchContext())

        assert len(observer.dispatched) == 1
        assert observer.errors == []

    @pytest.mark.asyncio
    async def test_sdk_error_is_logged_and_reraised(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def _raise(messages: list[messaging.Message], app: object = None) -> Any:
            raise FirebaseError("UNAVAILABLE", "fcm down")

        monkeypatch.setattr(dispatcher_module.messaging, "send_each", _raise)
        dispatcher = FirebasePushDispatcher(FirebaseOptions(app_name="test"), app=_APP)

        with (
            caplog.at_level(logging.ERROR, logger=dispatcher_module.__name__),
            pytest.raises(FirebaseError),
        ):
            await dispatcher.dispatch(_notification(_device("d1")), DispatchContext())

        errors = [record for record in caplog.records if record.getMessage() == "firebase_send_each_failed"]
        assert len(errors) == 1
        assert errors[0].error_type == "FirebaseError"


class TestConstruction:
    """Construção do dispatcher."""

    def test_none_options_raises(self) -> None:
        with pytest.raises(ValueError, match="options"):
            FirebasePushDispatcher(None)  # type: ignore[arg-type]

    def test_resolves_app_from_registry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        resolved = object()
        calls: list[FirebaseOptions] = []

        def _fake_get_or_create(options: FirebaseOptions) -> object:
            calls.append(options)
            return resolved

        monkeypatch.setattr(dispatcher_module, "get_or_create_app", _fake_get_or_create)
        options = FirebaseOptions(app_name="push")

        dispatcher = FirebasePushDispatcher(options)

        assert dispatcher.app is resolved
        assert calls == [options]
