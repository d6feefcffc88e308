"""
descriptors decodes the instance and services variables.

Nothing is cached: every call reads the variable again and decodes it into
fresh objects.
"""
import json
import logging

from .error import DecodingError
from .instance import ApplicationInstanceInfo
from .settings import EnvironmentSettings

__all__ = ("ServiceDescriptorStore",)

logger = logging.getLogger(__name__)


class ServiceDescriptorStore:
    def __init__(self, accessor, settings=None):
        self.accessor = accessor
        self.settings = settings or EnvironmentSettings()

    def get_instance_info(self):
        variable = self.settings.application_variable
        content = self.accessor.get_value(variable)
        if content is None or content.strip() == "":
            return None

        info = self._decode(variable, content)
        if not isinstance(info, dict):
            raise DecodingError(
                f"Expected a JSON object, got '{type(info).__name__}'",
                variable=variable,
            )

        return ApplicationInstanceInfo(info)

    def get_raw_services(self):
        """
        Return the services variable as a dict whose key is a category (for
        example "mysql-5.1") and whose value is the list of descriptors in
        that category.
        """
        variable = self.settings.services_variable
        content = self.accessor.get_value(variable)
        if content is None or content == "":
            return {}

        services = self._decode(variable, content)
        if not isinstance(services, dict):
            raise DecodingError(
                f"Expected a JSON object, got '{type(services).__name__}'",
                variable=variable,
            )

        for category, descriptors in services.items():
            if not isinstance(descriptors, list):
                raise DecodingError(
                    f"Services under '{category}' should be a list", variable=variable
                )
            for descriptor in descriptors:
                if not isinstance(descriptor, dict):
                    raise DecodingError(
                        f"Service under '{category}' should be an object",
                        variable=variable,
                    )

        return services

    def get_service_descriptors(self):
        descriptors = []
        for category_descriptors in self.get_raw_services().values():
            descriptors.extend(category_descriptors)

        return descriptors

    @staticmethod
    def _decode(variable, content):
        try:
            return json.loads(content)
        except (ValueError, RecursionError) as e:
            logger.warning("Cannot decode %s: %s", variable, e)
            raise DecodingError(f"Invalid JSON: {e}", variable=variable) from e
