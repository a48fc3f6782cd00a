"""
Tests for the composition point.

The container is the only place where configuration names turn into
concrete classes; services always receive the bound instances.
"""

from decimal import Decimal

import pytest

from adapters.event_loggers import JsonLinesEventLogger, MemoryEventLogger, StandardEventLogger
from adapters.notification_channels import (
    LogEmailSender,
    LogSmsSender,
    OutboxEmailSender,
    OutboxSmsSender,
)
from adapters.payment_gateways import PaypalGateway, StripeGateway
from app.container import Container, build_container
from app.exceptions import ConfigurationError, ServiceValidationError
from repositories import (
    InMemoryOrderRepository,
    InMemoryUserRepository,
    SqlOrderRepository,
    SqlUserRepository,
)

from test_fixtures import db_session, make_settings, session_factory


def test_memory_bindings():
    container = build_container(make_settings())

    assert isinstance(container.event_logger, MemoryEventLogger)
    assert isinstance(container.email_sender, OutboxEmailSender)
    assert isinstance(container.sms_sender, OutboxSmsSender)
    assert isinstance(container.user_repository(None), InMemoryUserRepository)
    assert isinstance(container.order_repository(None), InMemoryOrderRepository)


def test_memory_repositories_share_state():
    container = Container(make_settings())
    user = container.user_repository(None).add("a@example.com")

    assert container.user_repository(None).get(user.user_id) is user
    order = container.order_repository(None).add(user.user_id, Decimal("1.00"), "USD")
    assert container.order_service(None).get(order.order_id) is order


def test_sql_bindings(db_session):
    container = Container(make_settings(storage_backend="sql"))

    assert container.memory_store is None
    assert isinstance(container.user_repository(db_session), SqlUserRepository)
    assert isinstance(container.order_repository(db_session), SqlOrderRepository)
    assert container.user_service(db_session).users.db is db_session



def test_sql_engine_built_from_container_settings():
    container = Container(make_settings(storage_backend="sql", database_url="sqlite:///custom.db"))
    try:
        assert str(container.engine.url) == "sqlite:///custom.db"
        assert container.session_factory.kw["bind"] is container.engine
    finally:
        container.engine.dispose()

    memory = Container(make_settings())
    assert memory.engine is None
    assert memory.session_factory is None


def test_log_transports_and_sinks():
    container = Container(
        make_settings(email_transport="log", sms_transport="log", event_log_sink="logging")
    )

    assert isinstance(container.email_sender, LogEmailSender)
    assert isinstance(container.sms_sender, LogSmsSender)
    assert isinstance(container.event_logger, StandardEventLogger)


def test_sms_can_be_unbound():
    container = Container(make_settings(sms_transport="none"))

    assert container.sms_sender is None
    assert container.notification_service().sms is None


def test_jsonl_sink(tmp_path):
    container = Container(
        make_settings(event_log_sink="jsonl", event_log_path=str(tmp_path / "events.jsonl"))
    )
    assert isinstance(container.event_logger, JsonLinesEventLogger)


def test_jsonl_sink_requires_path():
    with pytest.raises(ConfigurationError):
        Container(make_settings(event_log_sink="jsonl"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"event_log_sink": "syslog"},
        {"email_transport": "smtp"},
        {"sms_transport": "pager"},
        {"payment_gateway": "bitcoin"},
    ],
)
def test_unknown_names_fail_at_wiring_time(overrides):
    with pytest.raises(ConfigurationError):
        Container(make_settings(**overrides))


def test_gateway_resolution():
    container = Container(make_settings(payment_gateway="paypal"))

    assert isinstance(container.gateway(), PaypalGateway)
    assert isinstance(container.gateway("stripe"), StripeGateway)
    assert container.payment_service(None).gateway.name == "paypal"
    assert container.payment_service(None, gateway_name="stripe").gateway.name == "stripe"

    with pytest.raises(ServiceValidationError):
        container.gateway("bitcoin")


def test_services_share_process_wide_bindings():
    container = Container(make_settings())

    assert container.user_service(None).email is container.email_sender
    assert container.payment_service(None).events is container.event_logger
    assert container.notification_service().events is container.event_logger
    assert container.order_service(None).default_currency == "USD"
