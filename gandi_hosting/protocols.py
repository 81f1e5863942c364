"""Protocol definitions for the seams of the client.

Caller is the remote call primitive every resource client is built on.
The translator protocols describe what a wire schema version has to
provide for each resource kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from gandi_hosting.types import (
        Disk,
        DiskFilter,
        DiskSpec,
        IPAddress,
        IPFilter,
        IPSpec,
        PrivateIPSpec,
        SSHKey,
    )

__all__ = [
    "Caller",
    "DiskTranslator",
    "IPTranslator",
    "SSHKeyTranslator",
]

WireMap: TypeAlias = Mapping[str, Any]


@runtime_checkable
class Caller(Protocol):
    """Remote call primitive.

    One call is one round trip. Parameters are positional and their order
    must match the remote method signature. Optional values are conveyed by
    leaving them out of the sparse maps in ``params``.

    Implementations raise gandi_hosting.exceptions.RemoteError on transport
    or protocol failures.
    """

    def send(self, method: str, params: list[Any]) -> Any: ...


class DiskTranslator(Protocol):
    version: str

    def to_wire_create(self, spec: DiskSpec) -> WireMap: ...
    def to_wire_filter(self, disk_filter: DiskFilter) -> WireMap: ...
    def to_wire_update(self, *, name: str = "", size: int | None = None) -> WireMap: ...
    def parse_id(self, value: str, entity: str, field: str, fn: str) -> int: ...
    def from_wire(self, wire: WireMap) -> Disk: ...


class IPTranslator(Protocol):
    version: str

    def to_wire_create(self, spec: IPSpec) -> WireMap: ...
    def to_wire_private_create(self, spec: PrivateIPSpec) -> WireMap: ...
    def to_wire_filter(self, ip_filter: IPFilter) -> WireMap: ...
    def parse_id(self, value: str, entity: str, field: str, fn: str) -> int: ...
    def from_wire(self, wire: WireMap) -> IPAddress: ...


class SSHKeyTranslator(Protocol):
    version: str

    def to_wire_create(self, name: str, value: str) -> WireMap: ...
    def to_wire_filter(self, name: str = "") -> WireMap: ...
    def parse_id(self, value: str, entity: str, field: str, fn: str) -> int: ...
    def from_wire(self, wire: WireMap) -> SSHKey: ...
