from typing import Tuple, Type

import structlog

from asset_manager.exceptions.services import ServiceResponseError, ServiceUnreachable

log = structlog.get_logger(__name__)


class ServiceAdapter:
    """Error handling for requests made through one of the SDK's HTTP clients.

    The SDK raises its own exception type for non-2xx responses and lets
    :mod:`urllib` errors bubble up for anything on the transport level.
    Sub-classes route every call through :meth:`call`, which converts both
    into :exc:`asset_manager.exceptions.services.ServiceError` subclasses,
    so the lifecycle stages do not have to know about SDK internals.
    """

    #: Name of the service, used in log events and error messages.
    SERVICE = "service"

    #: SDK exception types signalling an HTTP error response.
    HTTP_ERRORS: Tuple[Type[Exception], ...] = ()

    def handle_http_error(self, exc):
        """Raise a :exc:`ServiceResponseError` from the SDK's HTTP error.

        `algod` errors carry the status code as `code`; `kmd` errors do not.
        """
        raise ServiceResponseError(self.SERVICE, exc, getattr(exc, "code", None)) from exc

    def handle_connection_error(self, exc):
        """Raise a :exc:`ServiceUnreachable` from the transport error."""
        raise ServiceUnreachable(self.SERVICE, exc) from exc

    def call(self, method, *args, **kwargs):
        try:
            return method(*args, **kwargs)
        except self.HTTP_ERRORS as e:
            log.debug("Service returned an error", service=self.SERVICE, error=str(e))
            self.handle_http_error(e)
        except OSError as e:
            # URLError, socket timeouts and refused connections all derive from OSError.
            log.debug("Service unreachable", service=self.SERVICE, error=str(e))
            self.handle_connection_error(e)
