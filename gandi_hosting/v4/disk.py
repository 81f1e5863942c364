"""Disk translation for the v4 wire schema.

Sizes are whole GB in the domain model and MB on the wire.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from gandi_hosting.exceptions import ParseError
from gandi_hosting.types import Disk, DiskFilter, DiskSpec
from gandi_hosting.v4.parsing import id_str, parse_id, set_id, set_str
from gandi_hosting.v4.types import DiskCreateV4, DiskFilterV4, DiskUpdateV4

MB_PER_GB = 1024


def gb_to_mb(size: int) -> int:
    return size * MB_PER_GB


def mb_to_gb(size: int) -> int:
    return size // MB_PER_GB


class DiskV4Translator:
    version = "v4"

    def parse_id(self, value: str, entity: str, field: str, fn: str) -> int:
        return parse_id(value, entity, field, fn)

    def to_wire_create(self, spec: DiskSpec) -> DiskCreateV4:
        """Build the hosting.disk.create map.

        The region is required; name and size are sent only when set.
        """
        wire: dict[str, Any] = {
            "datacenter_id": parse_id(
                spec.region_id, "DiskSpec", "region_id", "to_wire_create(DiskSpec)"
            ),
        }
        set_str(wire, "name", spec.name)
        if spec.size < 0:
            raise ParseError("to_wire_create(DiskSpec)", "DiskSpec", "size")
        if spec.size > 0:
            wire["size"] = gb_to_mb(spec.size)
        return cast(DiskCreateV4, wire)

    def to_wire_filter(self, disk_filter: DiskFilter) -> DiskFilterV4:
        wire: dict[str, Any] = {}
        set_id(wire, "id", disk_filter.id, "DiskFilter", "id")
        set_id(wire, "datacenter_id", disk_filter.region_id, "DiskFilter", "region_id")
        set_str(wire, "name", disk_filter.name)
        set_id(wire, "vm_id", disk_filter.vm_id, "DiskFilter", "vm_id")
        return cast(DiskFilterV4, wire)

    def to_wire_update(self, *, name: str = "", size: int | None = None) -> DiskUpdateV4:
        """Build a hosting.disk.update map.

        ``size`` is the new total in GB. None leaves the size unchanged; any
        other value must be positive.
        """
        wire: dict[str, Any] = {}
        set_str(wire, "name", name)
        if size is not None:
            if size <= 0:
                raise ParseError("to_wire_update(Disk)", "Disk", "size")
            wire["size"] = gb_to_mb(size)
        return cast(DiskUpdateV4, wire)

    def from_wire(self, wire: Mapping[str, Any]) -> Disk:
        return Disk(
            id=id_str(wire.get("id")),
            name=wire.get("name") or "",
            size=mb_to_gb(wire.get("size") or 0),
            region_id=id_str(wire.get("datacenter_id")),
            state=wire.get("state") or "",
            type=wire.get("type") or "",
            vm_ids=tuple(str(vm) for vm in wire.get("vms_id") or ()),
            boot_disk=bool(wire.get("is_boot_disk", False)),
        )
