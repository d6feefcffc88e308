from types import SimpleNamespace

__all__ = (
    "CloudEnvironmentError",
    "ConfigError",
    "DecodingError",
    "IllegalStateError",
    "MissingFieldError",
    "RegistryError",
    "ServiceConstructionError",
)


class CloudEnvironmentError(Exception):
    def __init__(self, reason, **meta):
        self.meta = SimpleNamespace(**meta)

        super().__init__(reason)

    def __str__(self):
        if self.meta.__dict__:
            meta = ", ".join(
                f"{k}={v}" for k, v in self.meta.__dict__.items() if bool(v)
            )

            if meta:
                return f"{super().__str__()} ({meta})"

        return super().__str__()


class ConfigError(CloudEnvironmentError):
    """Invalid settings passed to the environment."""


class DecodingError(CloudEnvironmentError):
    """An environment variable holds something that is not the expected JSON."""


class ServiceConstructionError(CloudEnvironmentError):
    """A descriptor matched a service type but could not be turned into it."""


class MissingFieldError(CloudEnvironmentError):
    pass


class IllegalStateError(CloudEnvironmentError):
    pass


class RegistryError(CloudEnvironmentError):
    pass
