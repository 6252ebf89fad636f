#
#
#

__version__ = '0.1.0'

from .dnsapi_client import HetznerClient  # noqa: E402
from .exceptions import (  # noqa: E402
    HetznerClientConflict,
    HetznerClientDeserializeError,
    HetznerClientException,
    HetznerClientForbidden,
    HetznerClientMissingField,
    HetznerClientNotAcceptable,
    HetznerClientNotFound,
    HetznerClientStatusError,
    HetznerClientTransportError,
    HetznerClientUnauthorized,
    HetznerClientUnknownStatus,
    HetznerClientUnprocessable,
)
from .models import (  # noqa: E402
    Pagination,
    Record,
    RecordType,
    Zone,
    ZonesPage,
)

__all__ = [
    'HetznerClient',
    'HetznerClientConflict',
    'HetznerClientDeserializeError',
    'HetznerClientException',
    'HetznerClientForbidden',
    'HetznerClientMissingField',
    'HetznerClientNotAcceptable',
    'HetznerClientNotFound',
    'HetznerClientStatusError',
    'HetznerClientTransportError',
    'HetznerClientUnauthorized',
    'HetznerClientUnknownStatus',
    'HetznerClientUnprocessable',
    'Pagination',
    'Record',
    'RecordType',
    'Zone',
    'ZonesPage',
]
