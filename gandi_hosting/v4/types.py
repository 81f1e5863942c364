"""Hosting v4 wire types.

TypedDicts for XML-RPC payloads. Parameter maps are ``total=False``: a
key that is absent means "not set" and the remote side applies its own
default or does not constrain on it.
"""

from __future__ import annotations

from typing import NotRequired, TypedDict

# =============================================================================
# Response Types
# =============================================================================


class DiskV4(TypedDict):
    """Disk from hosting.disk.info / hosting.disk.list. Size is in MB."""

    id: int
    name: str
    size: int
    datacenter_id: int
    state: str
    type: str
    vms_id: list[int]
    is_boot_disk: bool


class IPAddressV4(TypedDict):
    id: int
    ip: str
    datacenter_id: int
    version: int
    state: str
    vm_id: NotRequired[int]
    iface_id: NotRequired[int]


class SSHKeyV4(TypedDict):
    """Key from hosting.ssh.info. Listings only carry id and name."""

    id: int
    name: str
    fingerprint: NotRequired[str]
    value: NotRequired[str]


# =============================================================================
# Parameter Types
# =============================================================================


class DiskCreateV4(TypedDict, total=False):
    datacenter_id: int
    name: str
    size: int


class DiskUpdateV4(TypedDict, total=False):
    name: str
    size: int


class DiskFilterV4(TypedDict, total=False):
    id: int
    datacenter_id: int
    name: str
    vm_id: int


class IfaceCreateV4(TypedDict, total=False):
    datacenter_id: int
    bandwidth: int
    ip_version: int
    ip: str
    vlan: int


class IPFilterV4(TypedDict, total=False):
    id: int
    ip: str
    datacenter_id: int
    version: int


class SSHKeyCreateV4(TypedDict):
    name: str
    value: str


class SSHKeyFilterV4(TypedDict, total=False):
    name: str
