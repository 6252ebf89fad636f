#
#
#

import argparse
import json
import logging
import sys

from .config import load_settings
from .dnsapi_client import HetznerClient
from .exceptions import HetznerClientException

log = logging.getLogger('hetzner_dns')


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='hetzner_dns', description='Hetzner DNS API client'
    )
    p.add_argument('--env', dest='env_path', help='Path to .env file')
    p.add_argument('--verbose', action='store_true', help='Debug logging')
    sub = p.add_subparsers(dest='command', required=True)

    zones = sub.add_parser('zones', help='List zones')
    zones.add_argument('--name', help='Exact zone name filter')
    zones.add_argument('--search', dest='search_name', help='Zone name search')
    zones.add_argument('--page', type=int)
    zones.add_argument('--per-page', dest='per_page', type=int)

    records = sub.add_parser('records', help='List records of a zone')
    records.add_argument(
        'zone_id', nargs='?', help='Zone id (defaults to HETZNER_ZONE_ID)'
    )

    get = sub.add_parser('get', help='Show a record')
    get.add_argument('record_id')

    create = sub.add_parser('create', help='Create a record')
    create.add_argument('name')
    create.add_argument('type', metavar='TYPE')
    create.add_argument('value')
    create.add_argument('--ttl', type=int, default=3600)
    create.add_argument('--zone', dest='zone_id')

    update = sub.add_parser('update', help='Replace a record')
    update.add_argument('record_id')
    update.add_argument('name')
    update.add_argument('type', metavar='TYPE')
    update.add_argument('value')
    update.add_argument('--ttl', type=int, default=3600)
    update.add_argument('--zone', dest='zone_id')

    delete = sub.add_parser('delete', help='Delete a record')
    delete.add_argument('record_id')
    return p


def _dump(value):
    if isinstance(value, list):
        value = [v.model_dump() for v in value]
    elif value is not None:
        value = value.model_dump()
    print(json.dumps(value, indent=2, sort_keys=True))


def run(client, args, default_zone_id=None):
    zone_id = getattr(args, 'zone_id', None) or default_zone_id
    command = args.command
    if command == 'zones':
        return client.list_zones(
            name=args.name,
            search_name=args.search_name,
            page=args.page,
            per_page=args.per_page,
        )
    if command in ('records', 'create', 'update') and not zone_id:
        raise ValueError('zone id required: pass it or set HETZNER_ZONE_ID')
    if command == 'records':
        return client.list_records(zone_id)
    if command == 'get':
        return client.get_record(args.record_id)
    if command == 'create':
        return client.create_record(
            args.value, args.ttl, args.type, args.name, zone_id
        )
    if command == 'update':
        return client.update_record(
            args.record_id, zone_id, args.type, args.name, args.value, args.ttl
        )
    if command == 'delete':
        client.delete_record(args.record_id)
        return None
    raise ValueError(f'unknown command {command}')


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.env_path)
    except ValueError as e:
        print(f'Config error: {e}', file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format='%(asctime)s %(levelname)-5s %(name)s %(message)s',
    )

    with HetznerClient(settings.token) as client:
        try:
            result = run(client, args, settings.zone_id)
        except ValueError as e:
            print(f'Argument error: {e}', file=sys.stderr)
            return 2
        except HetznerClientException as e:
            log.error('%s failed: %s', args.command, e)
            print(f'Error: {e}', file=sys.stderr)
            return 1

    _dump(result)
    return 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
