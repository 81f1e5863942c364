"""IP address translation for the v4 wire schema.

IP addresses are created through network interfaces (hosting.iface.create),
so the create maps here are interface parameters.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from gandi_hosting.exceptions import ParseError
from gandi_hosting.types import IPAddress, IPFilter, IPSpec, IPVersion, PrivateIPSpec
from gandi_hosting.v4.parsing import id_str, parse_id, set_id, set_str
from gandi_hosting.v4.types import IfaceCreateV4, IPFilterV4

_VERSIONS = frozenset(v.value for v in IPVersion)


def _check_version(version: int, entity: str, fn: str) -> int:
    if version not in _VERSIONS:
        raise ParseError(fn, entity, "version")
    return int(version)


class IPV4Translator:
    version = "v4"

    def parse_id(self, value: str, entity: str, field: str, fn: str) -> int:
        return parse_id(value, entity, field, fn)

    def to_wire_create(self, spec: IPSpec) -> IfaceCreateV4:
        fn = "to_wire_create(IPSpec)"
        return {
            "datacenter_id": parse_id(spec.region_id, "IPSpec", "region_id", fn),
            "ip_version": _check_version(spec.version, "IPSpec", fn),
            "bandwidth": spec.bandwidth,
        }

    def to_wire_private_create(self, spec: PrivateIPSpec) -> IfaceCreateV4:
        fn = "to_wire_create(PrivateIPSpec)"
        wire: dict[str, Any] = {
            "datacenter_id": parse_id(spec.region_id, "PrivateIPSpec", "region_id", fn),
            "bandwidth": spec.bandwidth,
            "vlan": parse_id(spec.vlan_id, "PrivateIPSpec", "vlan_id", fn),
        }
        set_str(wire, "ip", spec.ip)
        return cast(IfaceCreateV4, wire)

    def to_wire_filter(self, ip_filter: IPFilter) -> IPFilterV4:
        wire: dict[str, Any] = {}
        set_id(wire, "id", ip_filter.id, "IPFilter", "id")
        set_str(wire, "ip", ip_filter.ip)
        set_id(wire, "datacenter_id", ip_filter.region_id, "IPFilter", "region_id")
        if ip_filter.version is not None:
            wire["version"] = _check_version(
                ip_filter.version, "IPFilter", "to_wire_filter(IPFilter)"
            )
        return cast(IPFilterV4, wire)

    def from_wire(self, wire: Mapping[str, Any]) -> IPAddress:
        version = wire.get("version") or 0
        return IPAddress(
            id=id_str(wire.get("id")),
            ip=wire.get("ip") or "",
            region_id=id_str(wire.get("datacenter_id")),
            version=IPVersion(version) if version in _VERSIONS else version,
            vm_id=id_str(wire.get("vm_id", 0)),
            state=wire.get("state") or "",
        )
