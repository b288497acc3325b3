class ServiceError(ConnectionError):
    """There was an error while sending a request to/receiving a response from
    the ledger node or the key daemon.

    Errors subclassing from this exception are raised on the communication
    layer level, i.e. by the :mod:`asset_manager.clients` adapters. The
    lifecycle stages translate them into the matching
    :exc:`asset_manager.exceptions.AssetManagerError` subclass.
    """

    def __init__(self, service: str, reason=None):
        self.service = service
        super(ServiceError, self).__init__(
            f"Error communicating with '{service}'! {reason or ''}".strip()
        )


class ServiceUnreachable(ServiceError):
    """The service could not be reached at all.

    Raised from:

        * :exc:`urllib.error.URLError`
        * :exc:`ConnectionError`
        * :exc:`socket.timeout`
    """


class ServiceResponseError(ServiceError):
    """We received a response from the service, but it signalled an error.

    The HTTP status code is available at :attr:`.status_code`, if the
    underlying SDK exposed it.
    """

    def __init__(self, service: str, reason=None, status_code=None):
        self.status_code = status_code
        super(ServiceResponseError, self).__init__(service, reason)
