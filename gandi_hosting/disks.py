"""Disk operations.

Mutations go through the same sequence: translate the input, issue the
mutating call, wait for the returned operation, then read the disk back.
"""

from __future__ import annotations

import threading
from dataclasses import replace

from loguru import logger

from gandi_hosting.exceptions import MismatchError, NotProvidedError
from gandi_hosting.operation import Operation, OperationTracker
from gandi_hosting.protocols import Caller, DiskTranslator
from gandi_hosting.types import Disk, DiskFilter, DiskImage, DiskSpec


class DiskClient:
    """Disk operations on top of a caller, a translator and a tracker.

    Example:
        disks = DiskClient(caller, V4.disk, OperationTracker(caller))
        disk = disks.create(DiskSpec(region_id="3", name="data", size=20))
        disk = disks.extend(disk, 10)
    """

    def __init__(
        self,
        caller: Caller,
        translator: DiskTranslator,
        tracker: OperationTracker,
    ) -> None:
        self._caller = caller
        self._translator = translator
        self._tracker = tracker
        self._log = logger.bind(component="disk", schema=translator.version)

    # =========================================================================
    # Mutations
    # =========================================================================

    def create(self, spec: DiskSpec, *, cancel: threading.Event | None = None) -> Disk:
        """Create an empty disk.

        Name and size are left to the remote defaults when unset.
        """
        params = self._translator.to_wire_create(spec)
        self._log.info(
            "Creating disk {name} in region {region}", name=spec.name, region=spec.region_id
        )
        op = self._mutate("hosting.disk.create", [params], cancel)
        return self._read(op.disk_id)

    def create_from_image(
        self,
        spec: DiskSpec,
        image: DiskImage,
        *,
        cancel: threading.Event | None = None,
    ) -> Disk:
        """Create a disk holding a copy of ``image``.

        If ``spec.size`` is unset the disk gets the image size. If
        ``spec.region_id`` is unset the disk is created in the image region.
        """
        fn = "create_from_image"
        if not image.disk_id:
            raise NotProvidedError(fn, "DiskImage", "disk_id")
        if spec.region_id and image.region_id and spec.region_id != image.region_id:
            raise MismatchError(fn, "DiskSpec", "region_id")
        if not spec.region_id:
            spec = replace(spec, region_id=image.region_id)

        params = self._translator.to_wire_create(spec)
        image_id = self._translator.parse_id(image.disk_id, "DiskImage", "disk_id", fn)

        self._log.info(
            "Creating disk {name} from image {image}", name=spec.name, image=image.disk_id
        )
        op = self._mutate("hosting.disk.create_from", [params, image_id], cancel)
        return self._read(op.disk_id)

    def delete(self, disk: Disk, *, cancel: threading.Event | None = None) -> None:
        disk_id = self._disk_id(disk, "delete")
        self._log.info("Deleting disk {id}", id=disk.id)
        self._mutate("hosting.disk.delete", [disk_id], cancel)

    def extend(self, disk: Disk, size: int, *, cancel: threading.Event | None = None) -> Disk:
        """Grow ``disk`` by ``size`` GB. Disks cannot shrink."""
        disk_id = self._disk_id(disk, "extend")
        if size < 0:
            raise ValueError(f"Disks cannot shrink (asked to extend by {size}GB)")

        update = self._translator.to_wire_update(size=disk.size + size)
        self._log.info("Extending disk {id} by {size}GB", id=disk.id, size=size)
        op = self._mutate("hosting.disk.update", [disk_id, update], cancel)
        return self._read(op.disk_id if op.disk_id is not None else disk_id)

    def rename(self, disk: Disk, name: str, *, cancel: threading.Event | None = None) -> Disk:
        disk_id = self._disk_id(disk, "rename")
        if not name:
            raise NotProvidedError("rename", "Disk", "name")

        update = self._translator.to_wire_update(name=name)
        self._log.info("Renaming disk {id} to {name}", id=disk.id, name=name)
        op = self._mutate("hosting.disk.update", [disk_id, update], cancel)
        return self._read(op.disk_id if op.disk_id is not None else disk_id)

    # =========================================================================
    # Reads
    # =========================================================================

    def describe(self, disk_filter: DiskFilter) -> list[Disk]:
        """List the disks matching ``disk_filter``, in remote order.

        An empty filter matches every disk.
        """
        wire_filter = self._translator.to_wire_filter(disk_filter)
        params = [wire_filter] if wire_filter else []
        response = self._caller.send("hosting.disk.list", params)
        return [self._translator.from_wire(d) for d in response]

    def list_all(self) -> list[Disk]:
        return self.describe(DiskFilter())

    def from_id(self, disk_id: str) -> Disk:
        """Return the disk with id ``disk_id``, or an empty Disk if none."""
        if not disk_id:
            return Disk()
        return self._first(DiskFilter(id=disk_id))

    def from_name(self, name: str) -> Disk:
        """Return the disk named ``name``, or an empty Disk if none."""
        if not name:
            return Disk()
        return self._first(DiskFilter(name=name))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _first(self, disk_filter: DiskFilter) -> Disk:
        disks = self.describe(disk_filter)
        return disks[0] if disks else Disk()

    def _disk_id(self, disk: Disk, fn: str) -> int:
        if not disk.id:
            raise NotProvidedError(fn, "Disk", "id")
        return self._translator.parse_id(disk.id, "Disk", "id", fn)

    def _mutate(
        self,
        method: str,
        params: list[object],
        cancel: threading.Event | None,
    ) -> Operation:
        op = Operation.from_wire(self._caller.send(method, params))
        self._log.debug("{method} started operation {op}", method=method, op=op.id)
        self._tracker.wait(op, cancel=cancel)
        return op

    def _read(self, disk_id: int | None) -> Disk:
        response = self._caller.send("hosting.disk.info", [disk_id])
        return self._translator.from_wire(response)
