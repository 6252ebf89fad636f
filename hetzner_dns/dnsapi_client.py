#
#
#

import logging

from pydantic import ValidationError
from requests import RequestException, Session

from . import __version__ as package_version
from .exceptions import (
    STATUS_ERRORS,
    HetznerClientDeserializeError,
    HetznerClientMissingField,
    HetznerClientNotFound,
    HetznerClientTransportError,
    HetznerClientUnknownStatus,
)
from .models import Record, RecordsPage, RecordType, ZonesPage

# Only these statuses carry the "taken" detail worth surfacing
TAKEN_DETAIL_STATUSES = (409, 422)

DEFAULT_RECORD_TTL = 0


class HetznerClient(object):
    BASE_URL = 'https://dns.hetzner.com/api/v1'

    def __init__(self, token):
        self.log = logging.getLogger('HetznerClient')
        self.log.debug('__init__: token=***, base_url=%s', self.BASE_URL)
        session = Session()
        session.headers.update(
            {
                'Auth-API-Token': token,
                'User-Agent': f'hetzner-dns/{package_version}',
            }
        )
        self._session = session
        self._token = token

    def __repr__(self):
        return f'HetznerClient(token=***, base_url={self.base_url!r})'

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def auth_token(self):
        return self._token

    @property
    def base_url(self):
        return self.BASE_URL

    def close(self):
        self._session.close()

    # --- Transport -------------------------------------------------------

    def _do(self, method, path, params=None, data=None):
        url = f'{self.base_url}{path}'
        try:
            response = self._session.request(
                method, url, params=params, json=data
            )
        except RequestException as e:
            self.log.debug('_do: %s %s failed: %s', method, path, e)
            raise HetznerClientTransportError(str(e)) from e

        status = response.status_code
        if 200 <= status < 300:
            return response

        message = self._error_message(response)
        self.log.debug(
            '_do: %s %s returned %d: %s', method, path, status, message
        )
        raise STATUS_ERRORS.get(status, HetznerClientUnknownStatus)(
            status, message
        )

    def _do_json(self, method, path, params=None, data=None):
        response = self._do(method, path, params, data)
        try:
            body = response.json()
        except ValueError as e:
            raise HetznerClientDeserializeError(
                f'{method} {path}: response is not JSON'
            ) from e
        if not isinstance(body, dict):
            raise HetznerClientDeserializeError(
                f'{method} {path}: expected a JSON object, got '
                f'{type(body).__name__}'
            )
        return body

    def _error_message(self, response):
        """Best-effort extraction of the server's explanation of a failure.

        Looks at ``{"error": {"message", "details": {"taken"}}}`` first,
        then a top level ``"message"``, then falls back to the raw body.
        """
        text = response.text or None
        try:
            body = response.json()
        except ValueError:
            return text
        if not isinstance(body, dict):
            return text

        message = None
        taken = None
        error = body.get('error')
        if isinstance(error, dict):
            message = error.get('message') or None
            details = error.get('details')
            if isinstance(details, dict):
                taken = details.get('taken')
        if message is None:
            message = body.get('message') or text

        if taken and response.status_code in TAKEN_DETAIL_STATUSES:
            message = f'{message}: taken: {taken}'
        return message

    # --- Decoding ------------------------------------------------------

    def _envelope(self, body, key):
        value = body.get(key)
        if value is None:
            raise HetznerClientMissingField(key)
        return value

    def _decode(self, model, data):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise HetznerClientDeserializeError(str(e)) from e

    def _fill_record_ttl(self, record):
        # The API leaves ttl off records that inherit the zone default
        if isinstance(record, dict) and record.get('ttl') is None:
            record = dict(record, ttl=DEFAULT_RECORD_TTL)
        return record

    def _decode_record(self, data):
        return self._decode(Record, self._fill_record_ttl(data))

    # --- Validation ------------------------------------------------------

    def _require(self, name, value):
        if not value:
            raise ValueError(f'{name} must not be empty')

    def _record_body(self, zone_id, _type, name, value, ttl):
        self._require('zone_id', zone_id)
        if ttl < 0:
            raise ValueError(f'ttl must not be negative, got {ttl}')
        if isinstance(_type, RecordType):
            _type = _type.value
        return {
            'value': value,
            'ttl': ttl,
            'type': _type,
            'name': name,
            'zone_id': zone_id,
        }

    # --- Zones -----------------------------------------------------------

    def list_zones_page(
        self, name=None, search_name=None, page=None, per_page=None
    ):
        self.log.debug(
            'list_zones_page: name=%s, search_name=%s, page=%s, per_page=%s',
            name,
            search_name,
            page,
            per_page,
        )
        params = {
            k: v
            for k, v in (
                ('name', name),
                ('search_name', search_name),
                ('page', page),
                ('per_page', per_page),
            )
            if v is not None
        }
        body = self._do_json('GET', '/zones', params or None)
        self._envelope(body, 'zones')
        return self._decode(ZonesPage, body)

    def list_zones(
        self, name=None, search_name=None, page=None, per_page=None
    ):
        return self.list_zones_page(
            name=name, search_name=search_name, page=page, per_page=per_page
        ).zones

    def zone_by_name(self, name):
        self.log.debug('zone_by_name: name=%s', name)
        self._require('name', name)
        for zone in self.list_zones(name=name):
            if zone.name == name:
                return zone
        raise HetznerClientNotFound(404, f'zone {name} not found')

    # --- Records ---------------------------------------------------------

    def list_records(self, zone_id, page=None, per_page=None):
        self.log.debug('list_records: zone_id=%s', zone_id)
        self._require('zone_id', zone_id)
        params = {'zone_id': zone_id}
        if page is not None:
            params['page'] = page
        if per_page is not None:
            params['per_page'] = per_page

        body = self._do_json('GET', '/records', params)
        records = self._envelope(body, 'records')
        if not isinstance(records, list):
            raise HetznerClientDeserializeError(
                f'records: expected a list, got {type(records).__name__}'
            )
        filled = [self._fill_record_ttl(record) for record in records]
        ret = self._decode(RecordsPage, {'records': filled}).records
        self.log.debug('list_records:   found %d records', len(ret))
        return ret

    def get_record(self, record_id):
        self.log.debug('get_record: record_id=%s', record_id)
        self._require('record_id', record_id)
        body = self._do_json('GET', f'/records/{record_id}')
        # Observed both wrapped in "record" and bare depending on API version
        if isinstance(body.get('record'), dict):
            body = body['record']
        return self._decode_record(body)

    def create_record(self, value, ttl, _type, name, zone_id):
        self.log.debug(
            'create_record: zone_id=%s, name=%s, type=%s, ttl=%s',
            zone_id,
            name,
            _type,
            ttl,
        )
        data = self._record_body(zone_id, _type, name, value, ttl)
        body = self._do_json('POST', '/records', data=data)
        return self._decode_record(self._envelope(body, 'record'))

    def update_record(self, record_id, zone_id, _type, name, value, ttl):
        self.log.debug(
            'update_record: record_id=%s, zone_id=%s, name=%s, type=%s, '
            'ttl=%s',
            record_id,
            zone_id,
            name,
            _type,
            ttl,
        )
        self._require('record_id', record_id)
        # PUT replaces every mutable field, same shape as a create
        data = self._record_body(zone_id, _type, name, value, ttl)
        body = self._do_json('PUT', f'/records/{record_id}', data=data)
        return self._decode_record(self._envelope(body, 'record'))

    def delete_record(self, record_id):
        self.log.debug('delete_record: record_id=%s', record_id)
        self._require('record_id', record_id)
        self._do('DELETE', f'/records/{record_id}')
