import threading

import pytest

from cloudenv.env.error import RegistryError
from cloudenv.env.registry import (
    DEFAULT_REGISTRY,
    ServiceLabelRegistry,
    build_default_registry,
)
from cloudenv.env.serviceinfo import (
    MongoServiceInfo,
    MysqlServiceInfo,
    PostgresqlServiceInfo,
    RabbitServiceInfo,
    RedisServiceInfo,
    ServiceInfo,
)


class Test_ServiceLabelRegistry:
    def test_register(self):
        registry = ServiceLabelRegistry()
        registry.register(MysqlServiceInfo, "mysql-5.1")
        registry.register(MysqlServiceInfo, "mysql-5.5")

        assert registry.labels_for(MysqlServiceInfo) == {"mysql-5.1", "mysql-5.5"}
        assert registry.type_allows_label(MysqlServiceInfo, "mysql-5.5")
        assert registry.type_for_label("mysql-5.1") is MysqlServiceInfo
        assert MysqlServiceInfo in registry

    def test_register_idempotent(self):
        registry = ServiceLabelRegistry()
        registry.register(RedisServiceInfo, "redis-2.2")
        registry.register(RedisServiceInfo, "redis-2.2")

        assert registry.labels_for(RedisServiceInfo) == {"redis-2.2"}
        assert registry.service_types() == [RedisServiceInfo]

    def test_register_conflicting_label(self):
        """
        Test if a label cannot be associated with two different types.
        """
        registry = ServiceLabelRegistry([(MysqlServiceInfo, "sql")])

        with pytest.raises(RegistryError) as excinfo:
            registry.register(PostgresqlServiceInfo, "sql")

        assert "Label 'sql' is already registered to 'MysqlServiceInfo'" in str(
            excinfo.value
        )
        assert registry.labels_for(PostgresqlServiceInfo) == frozenset()

    def test_register_invalid(self):
        registry = ServiceLabelRegistry()

        with pytest.raises(RegistryError):
            registry.register(MysqlServiceInfo, "")

        with pytest.raises(RegistryError):
            registry.register("MysqlServiceInfo", "mysql-5.1")

    def test_freeze(self):
        registry = ServiceLabelRegistry([(MysqlServiceInfo, "mysql-5.1")]).freeze()

        assert registry.frozen
        with pytest.raises(RegistryError) as excinfo:
            registry.register(RedisServiceInfo, "redis-2.2")

        assert "frozen registry" in str(excinfo.value)
        assert registry.labels_for(RedisServiceInfo) == frozenset()

    def test_unregistered(self):
        registry = ServiceLabelRegistry()

        assert registry.labels_for(ServiceInfo) == frozenset()
        assert not registry.type_allows_label(ServiceInfo, "mysql-5.1")
        assert registry.type_for_label("mysql-5.1") is None

    def test_non_string_label(self):
        """
        Test if labels of the wrong JSON type are simply not allowed.
        """
        assert not DEFAULT_REGISTRY.type_allows_label(MysqlServiceInfo, ["mysql-5.1"])
        assert not DEFAULT_REGISTRY.type_allows_label(MysqlServiceInfo, None)
        assert DEFAULT_REGISTRY.type_for_label({"label": "mysql-5.1"}) is None

    def test_concurrent_reads(self):
        results = []

        def read():
            for _ in range(100):
                results.append(DEFAULT_REGISTRY.labels_for(RabbitServiceInfo))

        threads = [threading.Thread(target=read) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 400
        assert all(labels == results[0] for labels in results)


class Test_DefaultRegistry:
    def test_default_labels(self):
        assert DEFAULT_REGISTRY.frozen
        assert DEFAULT_REGISTRY.labels_for(MysqlServiceInfo) == {"mysql-5.1"}
        assert DEFAULT_REGISTRY.labels_for(RedisServiceInfo) == {"redis-2.2"}
        assert DEFAULT_REGISTRY.labels_for(MongoServiceInfo) == {"mongodb-1.8"}
        assert DEFAULT_REGISTRY.labels_for(PostgresqlServiceInfo) == {"postgresql-9.0"}
        assert DEFAULT_REGISTRY.labels_for(RabbitServiceInfo) == {
            "rabbitmq-2.4",
            "rabbitmq-srs-2.4.1",
            "rabbitmq-2.4.1",
        }

    def test_build_default_registry(self):
        """
        Test if every build returns an independent but equal registry.
        """
        registry = build_default_registry()

        assert registry is not DEFAULT_REGISTRY
        assert registry.service_types() == DEFAULT_REGISTRY.service_types()
        for service_type in registry.service_types():
            assert registry.labels_for(service_type) == DEFAULT_REGISTRY.labels_for(
                service_type
            )
