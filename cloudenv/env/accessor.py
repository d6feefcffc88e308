import os

__all__ = ("EnvironmentAccessor",)


class EnvironmentAccessor:
    """
    Environment available to the deployed application. Pass `environ` to
    read from a plain mapping instead of the process environment.
    """

    def __init__(self, environ=None):
        self._environ = os.environ if environ is None else environ

    def get_value(self, key):
        return self._environ.get(key)

    def __repr__(self):
        source = "os.environ" if self._environ is os.environ else "mapping"
        return f"{type(self).__name__}({source})"
