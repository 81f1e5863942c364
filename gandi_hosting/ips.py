"""IP address operations.

IP addresses live on network interfaces: creating one creates an interface
and deleting one deletes the interface that owns it.
"""

from __future__ import annotations

import threading

from loguru import logger

from gandi_hosting.exceptions import NotProvidedError, RemoteError
from gandi_hosting.operation import Operation, OperationTracker
from gandi_hosting.protocols import Caller, IPTranslator
from gandi_hosting.types import (
    DEFAULT_BANDWIDTH,
    IPAddress,
    IPFilter,
    IPSpec,
    PrivateIPSpec,
    Vlan,
)


class IPClient:
    """IP address operations on top of a caller, a translator and a tracker."""

    def __init__(
        self,
        caller: Caller,
        translator: IPTranslator,
        tracker: OperationTracker,
    ) -> None:
        self._caller = caller
        self._translator = translator
        self._tracker = tracker
        self._log = logger.bind(component="ip", schema=translator.version)

    def create(self, spec: IPSpec, *, cancel: threading.Event | None = None) -> IPAddress:
        """Allocate a public address of ``spec.version`` in ``spec.region_id``."""
        params = self._translator.to_wire_create(spec)
        self._log.info(
            "Creating IPv{version} address in region {region}",
            version=int(spec.version), region=spec.region_id,
        )
        op = self._mutate("hosting.iface.create", [params], cancel)
        return self._read(op.ip_id)

    def create_private(
        self,
        vlan: Vlan,
        ip: str = "",
        *,
        bandwidth: int = DEFAULT_BANDWIDTH,
        cancel: threading.Event | None = None,
    ) -> IPAddress:
        """Bind an address inside ``vlan``.

        Args:
            vlan: Private network; its id and region are required.
            ip: Address to use. Left to the remote side when empty.
            bandwidth: Interface bandwidth in kbit/s.
        """
        if not vlan.id:
            raise NotProvidedError("create_private", "Vlan", "id")

        spec = PrivateIPSpec(
            vlan_id=vlan.id, region_id=vlan.region_id, ip=ip, bandwidth=bandwidth
        )
        params = self._translator.to_wire_private_create(spec)
        self._log.info("Creating private address {ip} in vlan {vlan}", ip=ip, vlan=vlan.id)
        op = self._mutate("hosting.iface.create", [params], cancel)
        return self._read(op.ip_id)

    def delete(self, ip: IPAddress, *, cancel: threading.Event | None = None) -> None:
        """Delete ``ip`` by deleting the interface that owns it."""
        fn = "delete"
        if not ip.id:
            raise NotProvidedError(fn, "IPAddress", "id")
        ip_id = self._translator.parse_id(ip.id, "IPAddress", "id", fn)

        info = self._caller.send("hosting.ip.info", [ip_id])
        iface_id = info.get("iface_id")
        if iface_id is None:
            raise RemoteError("hosting.ip.info", f"IP {ip.id} is not bound to an interface")

        self._log.info("Deleting IP {id} through interface {iface}", id=ip.id, iface=iface_id)
        self._mutate("hosting.iface.delete", [iface_id], cancel)

    def describe(self, ip_filter: IPFilter) -> list[IPAddress]:
        """List the addresses matching ``ip_filter``, in remote order."""
        params = self._translator.to_wire_filter(ip_filter)
        response = self._caller.send("hosting.ip.list", [params])
        return [self._translator.from_wire(ip) for ip in response]

    def list_all(self) -> list[IPAddress]:
        return self.describe(IPFilter())

    def from_id(self, ip_id: str) -> IPAddress:
        """Return the address with id ``ip_id``, or an empty IPAddress if none."""
        if not ip_id:
            return IPAddress()
        ips = self.describe(IPFilter(id=ip_id))
        return ips[0] if ips else IPAddress()

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

    def _read(self, ip_id: int | None) -> IPAddress:
        return self._translator.from_wire(self._caller.send("hosting.ip.info", [ip_id]))
