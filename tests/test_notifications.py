"""
Tests for notification delivery.

This test suite covers:
- NotificationService choosing channels from the target's contact details
- Narrow sender implementations (each implements a single capability)
- The notification endpoint and outbox inspection
"""

import uuid

import pytest

from adapters.event_loggers import MemoryEventLogger
from adapters.notification_channels import (
    LogEmailSender,
    LogSmsSender,
    Outbox,
    OutboxEmailSender,
    OutboxSmsSender,
)
from app.container import Container
from app.exceptions import ServiceValidationError
from domain.enums import NotificationChannel
from domain.interfaces import EmailSender, SmsSender
from domain.schemas import NotificationTarget
from services import NotificationService

from test_fixtures import client, container, kit, make_settings, make_user_payload


# =============================================================================
# SENDERS
# =============================================================================


@pytest.mark.parametrize(
    "sender",
    [OutboxEmailSender(Outbox(), sender="shop@example.com"), LogEmailSender(sender="shop@example.com")],
)
def test_email_senders_implement_only_email(sender):
    assert isinstance(sender, EmailSender)
    assert not isinstance(sender, SmsSender)
    sender.send_email("a@example.com", "Hi", "Body")


@pytest.mark.parametrize("sender", [OutboxSmsSender(Outbox()), LogSmsSender()])
def test_sms_senders_implement_only_sms(sender):
    assert isinstance(sender, SmsSender)
    assert not isinstance(sender, EmailSender)
    sender.send_sms("+15550100001", "Hi")


def test_outbox_filters_by_channel():
    outbox = Outbox()
    OutboxEmailSender(outbox, sender="shop@example.com").send_email("a@example.com", "S", "B")
    OutboxSmsSender(outbox).send_sms("+15550100001", "text")

    assert len(outbox) == 2
    assert [m.channel for m in outbox.messages()] == [
        NotificationChannel.EMAIL,
        NotificationChannel.SMS,
    ]
    assert outbox.messages(NotificationChannel.SMS)[0].body == "text"
    outbox.clear()
    assert outbox.messages() == []



def test_outbox_drops_oldest_beyond_limit():
    outbox = Outbox(max_messages=3)
    sender = OutboxSmsSender(outbox)
    for i in range(5):
        sender.send_sms("+15550100001", f"message {i}")

    assert len(outbox) == 3
    assert [m.body for m in outbox.messages()] == ["message 2", "message 3", "message 4"]


def test_container_outbox_uses_configured_limit():
    container = Container(make_settings(outbox_max_messages=2))
    for i in range(3):
        container.email_sender.send_email(f"u{i}@example.com", "S", "B")

    assert [m.recipient for m in container.outbox.messages()] == [
        "u1@example.com",
        "u2@example.com",
    ]


def test_log_senders_write_to_log(caplog):
    caplog.set_level("INFO", logger="solidshop.notifications")
    LogEmailSender(sender="shop@example.com").send_email("a@example.com", "Subject", "Body")
    LogSmsSender().send_sms("+15550100001", "Body")

    assert "email_logged" in caplog.text
    assert "sms_logged" in caplog.text


# =============================================================================
# NOTIFICATION SERVICE
# =============================================================================


def test_notify_uses_every_reachable_channel(kit):
    target = NotificationTarget(name="Sarah", email="s@example.com", phone="+15550100001")

    channels = kit.notification_service.notify(target, "Shipped", "Your order shipped")

    assert channels == [NotificationChannel.EMAIL, NotificationChannel.SMS]
    sms = kit.outbox.messages(NotificationChannel.SMS)[0]
    assert sms.recipient == "+15550100001"
    assert sms.body == "Shipped: Your order shipped"
    assert kit.events.events[-1] == (
        "notification_sent",
        {"recipient": "s@example.com", "channels": ["email", "sms"]},
    )


def test_notify_email_only_target(kit):
    target = NotificationTarget(email="s@example.com")
    assert kit.notification_service.notify(target, "S", "M") == [NotificationChannel.EMAIL]


def test_notify_without_sms_sender_skips_sms():
    outbox = Outbox()
    service = NotificationService(
        email=OutboxEmailSender(outbox, sender="shop@example.com"),
        sms=None,
        events=MemoryEventLogger(),
    )
    target = NotificationTarget(email="s@example.com", phone="+15550100001")

    assert service.notify(target, "S", "M") == [NotificationChannel.EMAIL]
    assert outbox.messages(NotificationChannel.SMS) == []


def test_notify_unreachable_target(kit):
    with pytest.raises(ServiceValidationError) as exc:
        kit.notification_service.notify(NotificationTarget(name="Nobody"), "S", "M")
    assert exc.value.code == "NO_CHANNEL"
    assert kit.events.events == []


def test_target_for_user(kit):
    user = kit.users.add("s@example.com", "Sarah", "+15550100001")
    target = NotificationService.target_for(user)
    assert target == NotificationTarget(
        name="Sarah", email="s@example.com", phone="+15550100001"
    )


# =============================================================================
# ENDPOINTS
# =============================================================================


def test_notify_user_endpoint_and_outbox(client, container):
    user = client.post("/users", json=make_user_payload()).json()
    container.outbox.clear()

    r = client.post(
        f"/users/{user['user_id']}/notifications",
        json={"subject": "Sale", "message": "Everything is 10% off"},
    )

    assert r.status_code == 200
    assert r.json() == {"channels": ["email", "sms"]}

    r2 = client.get("/notifications/outbox", params={"channel": "sms"})
    assert r2.status_code == 200
    messages = r2.json()
    assert len(messages) == 1
    assert messages[0]["recipient"] == user["phone"]

    assert len(client.get("/notifications/outbox").json()) == 2


def test_notify_unknown_user(client):
    r = client.post(
        f"/users/{uuid.uuid4()}/notifications", json={"subject": "S", "message": "M"}
    )
    assert r.status_code == 404


def test_notify_requires_subject(client):
    user = client.post("/users", json=make_user_payload()).json()
    r = client.post(
        f"/users/{user['user_id']}/notifications", json={"subject": "", "message": "M"}
    )
    assert r.status_code == 422
