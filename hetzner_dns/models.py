#
#
#

"""Typed representations of Hetzner DNS API payloads.

Responses are decoded into these models with ``model_validate``. Fields
the API documents as descriptive metadata are optional so that a server
omitting one of them does not fail the whole decode.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecordType(str, Enum):
    A = 'A'
    AAAA = 'AAAA'
    NS = 'NS'
    MX = 'MX'
    CNAME = 'CNAME'
    RP = 'RP'
    TXT = 'TXT'
    SOA = 'SOA'
    HINFO = 'HINFO'
    SRV = 'SRV'
    DANE = 'DANE'
    TLSA = 'TLSA'
    DS = 'DS'
    CAA = 'CAA'


RECORD_TYPES = frozenset(t.value for t in RecordType)


class TxtVerification(BaseModel):
    name: str = ''
    token: str = ''


class ZoneType(BaseModel):
    id: str = ''
    name: str = ''
    description: str = ''
    prices: Optional[Any] = None


class Zone(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    ttl: int = Field(default=0, ge=0)
    status: str = ''
    paused: bool = False
    records_count: int = Field(default=0, ge=0)
    created: Optional[str] = None
    modified: Optional[str] = None
    verified: Optional[str] = None
    ns: List[str] = Field(default_factory=list)
    legacy_ns: List[str] = Field(default_factory=list)
    legacy_dns_host: str = ''
    owner: str = ''
    project: str = ''
    registrar: str = ''
    permission: str = ''
    is_secondary_dns: bool = False
    txt_verification: Optional[TxtVerification] = None
    zone_type: Optional[ZoneType] = None


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    zone_id: str
    name: str
    type: str
    value: str
    ttl: int = Field(ge=0)
    created: Optional[str] = None
    modified: Optional[str] = None

    @property
    def known_type(self) -> bool:
        return self.type in RECORD_TYPES


class Pagination(BaseModel):
    page: int = 1
    per_page: int = 0
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    last_page: int = 1
    total_entries: int = 0


class Meta(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)


class ZonesPage(BaseModel):
    zones: List[Zone]
    meta: Meta = Field(default_factory=Meta)


class RecordsPage(BaseModel):
    records: List[Record]
