"""
settings holds the names of the environment variables cloudenv reads.
"""
from .attributeitem import AttributeItem
from .error import ConfigError

__all__ = (
    "APPLICATION_VARIABLE",
    "SERVICES_VARIABLE",
    "EnvironmentSettings",
)


APPLICATION_VARIABLE = "VCAP_APPLICATION"
SERVICES_VARIABLE = "VCAP_SERVICES"


@staticmethod
def _validate_variable(name):
    if isinstance(name, str) and name.strip() != "":
        return

    raise ConfigError("variable name should be a non-empty string")


class EnvironmentSettings(
    AttributeItem,
    fields="application_variable,services_variable",
    defaults=dict(
        application_variable=APPLICATION_VARIABLE,
        services_variable=SERVICES_VARIABLE,
    ),
):
    """Names of the instance and services variables. The defaults are the
    ones the platform sets; overriding them is mostly useful in tests.
    """

    _validate_application_variable = _validate_variable
    _validate_services_variable = _validate_variable
