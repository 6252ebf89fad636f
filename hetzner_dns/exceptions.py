#
#
#


class HetznerClientException(Exception):
    pass


class HetznerClientTransportError(HetznerClientException):
    pass


class HetznerClientDeserializeError(HetznerClientException):
    pass


class HetznerClientMissingField(HetznerClientException):
    def __init__(self, field):
        super().__init__(f'Missing field: {field}')
        self.field = field


class HetznerClientStatusError(HetznerClientException):
    reason = 'Unknown Status'

    def __init__(self, status_code, message=None):
        text = f'{status_code} {self.reason}'
        if message:
            text = f'{text}: {message}'
        super().__init__(text)
        self.status_code = status_code
        self.message = message


class HetznerClientUnauthorized(HetznerClientStatusError):
    reason = 'Unauthorized'


class HetznerClientForbidden(HetznerClientStatusError):
    reason = 'Forbidden'


class HetznerClientNotFound(HetznerClientStatusError):
    reason = 'Not Found'


class HetznerClientNotAcceptable(HetznerClientStatusError):
    reason = 'Not Acceptable'


class HetznerClientConflict(HetznerClientStatusError):
    reason = 'Conflict'


class HetznerClientUnprocessable(HetznerClientStatusError):
    reason = 'Unprocessable Entity'


class HetznerClientUnknownStatus(HetznerClientStatusError):
    pass


STATUS_ERRORS = {
    401: HetznerClientUnauthorized,
    403: HetznerClientForbidden,
    404: HetznerClientNotFound,
    406: HetznerClientNotAcceptable,
    409: HetznerClientConflict,
    422: HetznerClientUnprocessable,
}
