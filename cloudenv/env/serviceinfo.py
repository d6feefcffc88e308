"""
serviceinfo defines the typed views over bound service descriptors.

Every service type is built from one descriptor (the attribute bag found
in VCAP_SERVICES) through `ServiceInfo.from_attributes`. Connection
attributes live under the descriptor's "credentials" object; which keys
are read depends on the service type.
"""
from urllib.parse import quote, unquote, urlsplit

from .attributeitem import AttributeItem
from .error import ServiceConstructionError

__all__ = (
    "ServiceInfo",
    "DatabaseServiceInfo",
    "MysqlServiceInfo",
    "PostgresqlServiceInfo",
    "RedisServiceInfo",
    "MongoServiceInfo",
    "RabbitServiceInfo",
)


def _first(credentials, *keys):
    for key in keys:
        if credentials.get(key) is not None:
            return credentials[key]

    return None


def _userinfo(user, password):
    if not user and not password:
        return ""
    if not password:
        return f"{quote(user, safe='')}@"

    return f"{quote(user or '', safe='')}:{quote(password, safe='')}@"


@staticmethod
def _validate_name(name):
    if isinstance(name, str) and name != "":
        return

    raise ServiceConstructionError("name should be a non-empty string")


@staticmethod
def _validate_host(host):
    if isinstance(host, str) and host != "":
        return

    raise ServiceConstructionError("host should be a non-empty string")


@staticmethod
def _transform_port(port):
    # Older service gateways publish the port as a string.
    if isinstance(port, bool):
        raise ServiceConstructionError("port should be an int in the range of [0, 65535]")

    if isinstance(port, float) and not port.is_integer():
        raise ServiceConstructionError(f"port '{port}' is not an integer")

    try:
        port = int(port)
    except (TypeError, ValueError):
        raise ServiceConstructionError(f"port '{port}' is not a number")

    if 0 <= port < 65536:
        return port

    raise ServiceConstructionError("port should be an int in the range of [0, 65535]")


@staticmethod
def _transform_optional_str(value):
    if value is None:
        return ""
    if isinstance(value, str):
        return value

    return str(value)


class ServiceInfo(
    AttributeItem,
    fields="name,label,host,port,password",
    defaults=dict(label="", password=""),
):
    """
    Base of all service types. Subclasses add fields, override `_extract`
    to pick them out of the descriptor and provide a `url` property.
    """

    _error = ServiceConstructionError

    _validate_name = _validate_name
    _validate_host = _validate_host
    _transform_port = _transform_port
    _transform_label = _transform_optional_str
    _transform_password = _transform_optional_str

    @classmethod
    def from_attributes(cls, attributes):
        """Build the service info from a descriptor.

        Raises ServiceConstructionError when a required attribute is
        missing or malformed.
        """
        if not isinstance(attributes, dict):
            raise ServiceConstructionError(
                f"service descriptor should be an object, "
                f"got '{type(attributes).__name__}'"
            )

        credentials = attributes.get("credentials")
        if credentials is None:
            credentials = {}
        if not isinstance(credentials, dict):
            raise ServiceConstructionError("credentials should be an object")

        values = cls._extract(attributes, credentials)
        return cls(**{k: v for k, v in values.items() if v is not None})

    @classmethod
    def _extract(cls, attributes, credentials):
        return dict(
            name=attributes.get("name"),
            label=attributes.get("label"),
            host=_first(credentials, "hostname", "host"),
            port=credentials.get("port"),
            password=credentials.get("password"),
        )

    def __repr__(self):
        arg_list = ", ".join(
            f"{k}={'***' if k == 'password' and getattr(self, k) else getattr(self, k)!r}"
            for k in self._fields
        )
        return f"{type(self).__name__}({arg_list})"


class DatabaseServiceInfo(
    ServiceInfo,
    fields="name,label,host,port,password,database,user",
    defaults=dict(label="", password=""),
):
    """Relational database. `credentials.name` is the database name."""

    _scheme = None

    @staticmethod
    def _validate_database(database):
        if isinstance(database, str) and database != "":
            return

        raise ServiceConstructionError("database should be a non-empty string")

    @staticmethod
    def _validate_user(user):
        if isinstance(user, str) and user != "":
            return

        raise ServiceConstructionError("user should be a non-empty string")

    @classmethod
    def _extract(cls, attributes, credentials):
        values = super()._extract(attributes, credentials)
        values.update(
            database=credentials.get("name"),
            user=_first(credentials, "user", "username"),
        )
        return values

    @property
    def url(self):
        userinfo = _userinfo(self.user, self.password)
        return f"{self._scheme}://{userinfo}{self.host}:{self.port}/{self.database}"


class MysqlServiceInfo(DatabaseServiceInfo):
    _scheme = "mysql"


class PostgresqlServiceInfo(DatabaseServiceInfo):
    _scheme = "postgresql"


class RedisServiceInfo(ServiceInfo):
    @property
    def url(self):
        userinfo = f":{quote(self.password, safe='')}@" if self.password else ""
        return f"redis://{userinfo}{self.host}:{self.port}"


class MongoServiceInfo(
    ServiceInfo,
    fields="name,label,host,port,password,database,user",
    defaults=dict(label="", password="", user=""),
):
    _transform_user = _transform_optional_str

    @staticmethod
    def _validate_database(database):
        if isinstance(database, str) and database != "":
            return

        raise ServiceConstructionError("db should be a non-empty string")

    @classmethod
    def _extract(cls, attributes, credentials):
        values = super()._extract(attributes, credentials)
        values.update(database=credentials.get("db"), user=credentials.get("username"))
        return values

    @property
    def url(self):
        userinfo = _userinfo(self.user, self.password)
        return f"mongodb://{userinfo}{self.host}:{self.port}/{self.database}"


class RabbitServiceInfo(
    ServiceInfo,
    fields="name,label,host,port,password,user,vhost",
    defaults=dict(label="", password="", user="", vhost=""),
):
    """
    Message queue. The old gateway publishes hostname, port, user, pass and
    vhost separately; the SRS based one publishes a single amqp:// url.
    """

    DEFAULT_PORT = 5672

    _transform_user = _transform_optional_str
    _transform_vhost = _transform_optional_str

    @classmethod
    def _extract(cls, attributes, credentials):
        if credentials.get("url") is not None:
            return cls._extract_url(attributes, credentials["url"])

        values = super()._extract(attributes, credentials)
        values.update(
            password=_first(credentials, "pass", "password"),
            user=_first(credentials, "user", "username"),
            vhost=credentials.get("vhost"),
        )
        return values

    @classmethod
    def _extract_url(cls, attributes, url):
        if not isinstance(url, str):
            raise ServiceConstructionError("credentials.url should be a string")

        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            raise ServiceConstructionError(f"credentials.url is invalid: {e}") from e

        if parts.scheme != "amqp":
            raise ServiceConstructionError(f"Unsupported scheme in url '{parts.scheme}'")

        return dict(
            name=attributes.get("name"),
            label=attributes.get("label"),
            host=parts.hostname,
            port=cls.DEFAULT_PORT if port is None else port,
            password=unquote(parts.password) if parts.password else None,
            user=unquote(parts.username) if parts.username else None,
            vhost=unquote(parts.path[1:]) if parts.path else None,
        )

    @property
    def url(self):
        userinfo = _userinfo(self.user, self.password)
        vhost = quote(self.vhost, safe="")
        return f"amqp://{userinfo}{self.host}:{self.port}/{vhost}"
