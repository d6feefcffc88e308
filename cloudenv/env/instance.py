from copy import deepcopy

from .error import IllegalStateError, MissingFieldError

__all__ = ("ApplicationInstanceInfo",)


class ApplicationInstanceInfo:
    """
    ApplicationInstanceInfo is a read-through view over the decoded
    VCAP_APPLICATION object. Fields other than the URI list are passed
    through as they are and are None when missing.
    """

    URI_FIELDS = ("uris", "application_uris")

    def __init__(self, info):
        self._info = info

    def get_uris(self):
        for field in self.URI_FIELDS:
            if field in self._info:
                uris = self._info[field]
                if not isinstance(uris, list):
                    raise MissingFieldError(f"'{field}' should be a list of uris")
                if not all(isinstance(uri, str) for uri in uris):
                    raise MissingFieldError(f"'{field}' should only contain strings")

                return list(uris)

        raise MissingFieldError(
            "Instance info has no uri list", fields=", ".join(self.URI_FIELDS)
        )

    def get_cloud_api_uri(self):
        """
        Derive the cloud controller address from the first application uri
        by replacing its leftmost label with "api". This assumes the app is
        routed under the same domain as the controller, so an app on
        "myapp.example.com" maps to "api.example.com".
        """
        uris = self.get_uris()
        if not uris:
            raise IllegalStateError("There is no cloud API uri without application uris")

        uri = uris[0]
        if "." not in uri:
            raise IllegalStateError(f"Cannot derive cloud API uri from '{uri}'")

        return "api" + uri[uri.index(".") :]

    @property
    def name(self):
        return self._info.get("name")

    @property
    def instance_id(self):
        return self._info.get("instance_id")

    @property
    def instance_index(self):
        return self._info.get("instance_index")

    @property
    def host(self):
        return self._info.get("host")

    @property
    def port(self):
        return self._info.get("port")

    @property
    def limits(self):
        return self._info.get("limits")

    @property
    def version(self):
        return self._info.get("version")

    @property
    def start(self):
        return self._info.get("start")

    def to_dict(self):
        return deepcopy(self._info)

    def __eq__(self, value):
        if self.__class__ != value.__class__:
            return False

        return self._info == value._info

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, instance_id={self.instance_id!r})"
