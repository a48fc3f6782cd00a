"""
Composition point.

The only place that knows which concrete class stands behind each
abstraction. Everything is chosen from ``Settings``; services receive
their collaborators through their constructors.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.config import Settings
from app.exceptions import ConfigurationError
from adapters.event_loggers import (
    JsonLinesEventLogger,
    MemoryEventLogger,
    StandardEventLogger,
)
from adapters.notification_channels import (
    LogEmailSender,
    LogSmsSender,
    Outbox,
    OutboxEmailSender,
    OutboxSmsSender,
)
from adapters.payment_gateways import GatewayRegistry, gateway_registry
from domain.models import create_db_engine, create_session_factory
from domain.interfaces import (
    EmailSender,
    EventLogger,
    OrderRepository,
    PaymentGateway,
    SmsSender,
    UserRepository,
)
from repositories import (
    InMemoryOrderRepository,
    InMemoryStore,
    InMemoryUserRepository,
    SqlOrderRepository,
    SqlUserRepository,
)
from services import NotificationService, OrderService, PaymentService, UserService

logger = logging.getLogger("solidshop.container")


def build_event_logger(settings: Settings) -> EventLogger:
    sink = settings.event_log_sink
    if sink == "logging":
        return StandardEventLogger()
    if sink == "jsonl":
        if not settings.event_log_path:
            raise ConfigurationError("event_log_path is required for the jsonl event log sink")
        return JsonLinesEventLogger(settings.event_log_path)
    if sink == "memory":
        return MemoryEventLogger()
    raise ConfigurationError(f"Unknown event log sink '{sink}'")


def build_email_sender(settings: Settings, outbox: Outbox) -> EmailSender:
    transport = settings.email_transport
    if transport == "outbox":
        return OutboxEmailSender(outbox, sender=settings.mail_from)
    if transport == "log":
        return LogEmailSender(sender=settings.mail_from)
    raise ConfigurationError(f"Unknown email transport '{transport}'")


def build_sms_sender(settings: Settings, outbox: Outbox) -> Optional[SmsSender]:
    transport = settings.sms_transport
    if transport == "outbox":
        return OutboxSmsSender(outbox)
    if transport == "log":
        return LogSmsSender()
    if transport == "none":
        return None
    raise ConfigurationError(f"Unknown sms transport '{transport}'")


class Container:
    """Holds the process-wide bindings and builds per-request services"""

    def __init__(self, settings: Settings, registry: GatewayRegistry = gateway_registry):
        self.settings = settings
        self.registry = registry
        self.outbox = Outbox(max_messages=settings.outbox_max_messages)
        self.event_logger = build_event_logger(settings)
        self.email_sender = build_email_sender(settings, self.outbox)
        self.sms_sender = build_sms_sender(settings, self.outbox)

        if settings.payment_gateway not in registry:
            raise ConfigurationError(
                f"Unknown payment gateway '{settings.payment_gateway}'; "
                f"available: {', '.join(registry.names())}"
            )

        self.memory_store: Optional[InMemoryStore] = None
        self.engine: Optional[Engine] = None
        self.session_factory: Optional[sessionmaker] = None
        if settings.storage_backend == "memory":
            self.memory_store = InMemoryStore()
        else:
            self.engine = create_db_engine(settings.database_url, echo=settings.db_echo)
            self.session_factory = create_session_factory(self.engine)

        logger.info(
            f"container_ready storage={settings.storage_backend} "
            f"gateway={settings.payment_gateway} events={settings.event_log_sink} "
            f"email={settings.email_transport} sms={settings.sms_transport}"
        )

    # Repositories

    def user_repository(self, db: Optional[Session]) -> UserRepository:
        if self.memory_store is not None:
            return InMemoryUserRepository(self.memory_store)
        return SqlUserRepository(db)

    def order_repository(self, db: Optional[Session]) -> OrderRepository:
        if self.memory_store is not None:
            return InMemoryOrderRepository(self.memory_store)
        return SqlOrderRepository(db)

    # Payment gateways

    def gateway(self, name: Optional[str] = None) -> PaymentGateway:
        """
        Resolve a gateway by name, falling back to the configured default.

        Raises:
            ServiceValidationError: unknown gateway name
        """
        return self.registry.create(name or self.settings.payment_gateway, self.settings)

    # Services

    def user_service(self, db: Optional[Session]) -> UserService:
        return UserService(
            users=self.user_repository(db),
            email=self.email_sender,
            events=self.event_logger,
        )

    def order_service(self, db: Optional[Session]) -> OrderService:
        return OrderService(
            orders=self.order_repository(db),
            users=self.user_repository(db),
            events=self.event_logger,
            default_currency=self.settings.default_currency,
        )

    def payment_service(self, db: Optional[Session], gateway_name: Optional[str] = None) -> PaymentService:
        return PaymentService(
            gateway=self.gateway(gateway_name),
            orders=self.order_repository(db),
            events=self.event_logger,
        )

    def notification_service(self) -> NotificationService:
        return NotificationService(
            email=self.email_sender,
            sms=self.sms_sender,
            events=self.event_logger,
        )


def build_container(settings: Settings) -> Container:
    return Container(settings)
