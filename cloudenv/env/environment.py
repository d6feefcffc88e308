"""
environment provides simpler access to the Cloud Foundry environment.

CloudEnvironment interprets the VCAP_APPLICATION and VCAP_SERVICES variables
so callers do not need to parse JSON or match service labels themselves::

    env = CloudEnvironment()
    if env.is_cloud():
        mysql = env.get_service_info("orders-db", MysqlServiceInfo)
"""
import logging

from .accessor import EnvironmentAccessor
from .descriptors import ServiceDescriptorStore
from .error import IllegalStateError
from .resolver import ServiceResolver
from .settings import EnvironmentSettings

__all__ = ("CloudEnvironment",)

logger = logging.getLogger(__name__)


class CloudEnvironment:
    def __init__(self, accessor=None, registry=None, settings=None):
        self.accessor = accessor or EnvironmentAccessor()
        self.settings = settings or EnvironmentSettings()
        self.store = ServiceDescriptorStore(self.accessor, self.settings)
        self.resolver = ServiceResolver(self.store, registry)

    @property
    def registry(self):
        return self.resolver.registry

    def get_value(self, key):
        return self.accessor.get_value(key)

    def is_cloud(self):
        content = self.get_value(self.settings.application_variable)
        return content is not None and content.strip() != ""

    def get_instance_info(self):
        return self.store.get_instance_info()

    def get_cloud_api_uri(self):
        instance_info = self.get_instance_info()
        if instance_info is None:
            raise IllegalStateError(
                "There is no cloud API uri in a non-cloud deployment",
                variable=self.settings.application_variable,
            )

        return instance_info.get_cloud_api_uri()

    def get_raw_services(self):
        return self.store.get_raw_services()

    def get_services(self):
        """Return every service descriptor, flattened across categories."""
        return self.store.get_service_descriptors()

    def find_service(self, name):
        return self.resolver.find_by_name(name)

    def get_service_info(self, name, service_type):
        return self.resolver.get_service_info(name, service_type)

    def get_service_infos(self, service_type):
        infos = self.resolver.get_service_infos(service_type)
        logger.debug("Resolved %d %s service(s)", len(infos), service_type.__name__)
        return infos

    def get_all_service_infos(self):
        return self.resolver.get_all_service_infos()
