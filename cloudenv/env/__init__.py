from .accessor import EnvironmentAccessor
from .descriptors import ServiceDescriptorStore
from .environment import CloudEnvironment
from .error import (
    CloudEnvironmentError,
    ConfigError,
    DecodingError,
    IllegalStateError,
    MissingFieldError,
    RegistryError,
    ServiceConstructionError,
)
from .instance import ApplicationInstanceInfo
from .registry import DEFAULT_REGISTRY, ServiceLabelRegistry, build_default_registry
from .resolver import ServiceResolver
from .serviceinfo import (
    DatabaseServiceInfo,
    MongoServiceInfo,
    MysqlServiceInfo,
    PostgresqlServiceInfo,
    RabbitServiceInfo,
    RedisServiceInfo,
    ServiceInfo,
)
from .settings import EnvironmentSettings

__all__ = (
    "ApplicationInstanceInfo",
    "CloudEnvironment",
    "CloudEnvironmentError",
    "ConfigError",
    "DEFAULT_REGISTRY",
    "DatabaseServiceInfo",
    "DecodingError",
    "EnvironmentAccessor",
    "EnvironmentSettings",
    "IllegalStateError",
    "MissingFieldError",
    "MongoServiceInfo",
    "MysqlServiceInfo",
    "PostgresqlServiceInfo",
    "RabbitServiceInfo",
    "RedisServiceInfo",
    "RegistryError",
    "ServiceConstructionError",
    "ServiceDescriptorStore",
    "ServiceInfo",
    "ServiceLabelRegistry",
    "ServiceResolver",
    "build_default_registry",
)
