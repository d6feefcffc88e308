"""
resolver turns service descriptors into typed service infos.

Lookups that find nothing return None (or an empty list); only a
descriptor that matches but cannot be built is an error.
"""
import io
import logging
import textwrap

import ruamel.yaml as yaml

from .error import ServiceConstructionError
from .registry import DEFAULT_REGISTRY

__all__ = ("ServiceResolver",)

logger = logging.getLogger(__name__)

MASK = "***"


class ServiceResolver:
    def __init__(self, store, registry=None):
        self.store = store
        self.registry = DEFAULT_REGISTRY if registry is None else registry

    def find_by_name(self, name):
        # Names are expected to be unique. If they are not, the first
        # descriptor in services order wins.
        for descriptor in self.store.get_service_descriptors():
            if descriptor.get("name") == name:
                return descriptor

        return None

    def find_by_labels(self, labels):
        labels = frozenset(labels)
        return [
            descriptor
            for descriptor in self.store.get_service_descriptors()
            if isinstance(descriptor.get("label"), str)
            and descriptor.get("label") in labels
        ]

    def get_service_info(self, name, service_type):
        descriptor = self.find_by_name(name)
        if descriptor is None:
            logger.debug("No service named '%s'", name)
            return None

        if not self.registry.type_allows_label(service_type, descriptor.get("label")):
            logger.debug(
                "Service '%s' with label '%s' is not a %s",
                name,
                descriptor.get("label"),
                service_type.__name__,
            )
            return None

        return self.build(descriptor, service_type)

    def get_service_infos(self, service_type):
        labels = self.registry.labels_for(service_type)
        if not labels:
            return []

        # One bad descriptor fails the whole call; a partial inventory is
        # never returned.
        return [
            self.build(descriptor, service_type)
            for descriptor in self.find_by_labels(labels)
        ]

    def get_all_service_infos(self):
        infos = []
        for descriptor in self.store.get_service_descriptors():
            service_type = self.registry.type_for_label(descriptor.get("label"))
            if service_type is None:
                logger.debug(
                    "Skip service '%s' with unknown label '%s'",
                    descriptor.get("name"),
                    descriptor.get("label"),
                )
                continue

            infos.append(self.build(descriptor, service_type))

        return infos

    @staticmethod
    def build(descriptor, service_type):
        try:
            return service_type.from_attributes(descriptor)
        except ServiceConstructionError as e:
            name = descriptor.get("name")
            logger.debug("Cannot build %s from '%s': %s", service_type.__name__, name, e)

            definition = textwrap.indent(_dump_masked(descriptor), " " * 2)
            raise ServiceConstructionError(
                f"Failed to create service information for '{name}': {e}\n{definition}",
                service=name,
                type=service_type.__name__,
            ) from e


def _mask(descriptor):
    masked = dict(descriptor)
    credentials = masked.get("credentials")
    if isinstance(credentials, dict):
        masked["credentials"] = {key: MASK for key in credentials}

    return masked


def _dump_masked(descriptor):
    stream = io.StringIO()
    yaml.YAML().dump(_mask(descriptor), stream)
    return stream.getvalue()
