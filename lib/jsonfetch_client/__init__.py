from .auth import AuthorizationType, add_authorization
from .client import FetchClient
from .codec import RawBody
from .config_types import ClientConfig
from .errors import ErrorKind, FetchError
from .interceptor import ErrorInterceptor
from .models import Credentials, FetchResponse, Method, Result

__all__ = [
    "AuthorizationType",
    "ClientConfig",
    "Credentials",
    "ErrorInterceptor",
    "ErrorKind",
    "FetchClient",
    "FetchError",
    "FetchResponse",
    "Method",
    "RawBody",
    "Result",
    "add_authorization",
]
