"""
registry maps service types to the labels that identify them in
VCAP_SERVICES.

A label names the backing technology and its version (e.g. "mysql-5.1").
Several labels may denote the same type after a service was renamed, but a
label never denotes more than one type.
"""
import logging
from threading import Lock

from .error import RegistryError
from .serviceinfo import (
    MongoServiceInfo,
    MysqlServiceInfo,
    PostgresqlServiceInfo,
    RabbitServiceInfo,
    RedisServiceInfo,
)

__all__ = (
    "DEFAULT_LABELS",
    "DEFAULT_REGISTRY",
    "ServiceLabelRegistry",
    "build_default_registry",
)

logger = logging.getLogger(__name__)


DEFAULT_LABELS = (
    (MysqlServiceInfo, "mysql-5.1"),
    (RedisServiceInfo, "redis-2.2"),
    (MongoServiceInfo, "mongodb-1.8"),
    (PostgresqlServiceInfo, "postgresql-9.0"),
    # the old rabbitmq service
    (RabbitServiceInfo, "rabbitmq-2.4"),
    # SRS based rabbitmq service, during testing
    (RabbitServiceInfo, "rabbitmq-srs-2.4.1"),
    # SRS based rabbitmq service, after the old one is gone
    (RabbitServiceInfo, "rabbitmq-2.4.1"),
)


class ServiceLabelRegistry:
    """
    Registry is written once and read many times. Register every label, then
    call `freeze()`; a frozen registry rejects writes and can be shared
    between threads without locking.
    """

    def __init__(self, entries=()):
        self._lock = Lock()
        self._frozen = False
        self._labels = {}
        self._types = {}

        for service_type, label in entries:
            self.register(service_type, label)

    @property
    def frozen(self):
        return self._frozen

    def register(self, service_type, label):
        if not isinstance(label, str) or label == "":
            raise RegistryError("label should be a non-empty string")
        if not isinstance(service_type, type):
            raise RegistryError(f"'{service_type!r}' is not a service type")

        with self._lock:
            if self._frozen:
                raise RegistryError(
                    "Cannot register a label on a frozen registry", label=label
                )

            owner = self._types.get(label)
            if owner is service_type:
                return
            if owner is not None:
                raise RegistryError(
                    f"Label '{label}' is already registered to '{owner.__name__}'",
                    type=service_type.__name__,
                )

            self._types[label] = service_type
            self._labels.setdefault(service_type, set()).add(label)

        logger.debug("Registered label '%s' for %s", label, service_type.__name__)

    def freeze(self):
        with self._lock:
            self._labels = {k: frozenset(v) for k, v in self._labels.items()}
            self._frozen = True

        return self

    def labels_for(self, service_type):
        return frozenset(self._labels.get(service_type, ()))

    def type_allows_label(self, service_type, label):
        if not isinstance(label, str):
            return False

        return label in self._labels.get(service_type, ())

    def type_for_label(self, label):
        if not isinstance(label, str):
            return None

        return self._types.get(label)

    def service_types(self):
        return list(self._labels)

    def __contains__(self, service_type):
        return service_type in self._labels

    def __repr__(self):
        entries = ", ".join(
            f"{t.__name__}={sorted(labels)}" for t, labels in self._labels.items()
        )
        return f"{type(self).__name__}({entries})"


def build_default_registry():
    return ServiceLabelRegistry(DEFAULT_LABELS).freeze()


DEFAULT_REGISTRY = build_default_registry()
