"""Domain model for hosting resources.

These types are stable across wire protocol versions. Identifiers are
opaque decimal strings and an empty string means "not set"; translators in
the version packages (e.g. gandi_hosting.v4) convert them to and from the
wire representation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "DEFAULT_BANDWIDTH",
    "Disk",
    "DiskFilter",
    "DiskImage",
    "DiskSpec",
    "IPAddress",
    "IPFilter",
    "IPSpec",
    "IPVersion",
    "PrivateIPSpec",
    "Region",
    "SSHKey",
    "Vlan",
]

# Default interface bandwidth in kbit/s
DEFAULT_BANDWIDTH = 102400


class IPVersion(IntEnum):
    IPv4 = 4
    IPv6 = 6


# =============================================================================
# Locations
# =============================================================================


@dataclass(frozen=True, slots=True)
class Region:
    """A datacenter."""

    id: str = ""
    name: str = ""
    country: str = ""


@dataclass(frozen=True, slots=True)
class Vlan:
    """A private network bound to a region."""

    id: str = ""
    name: str = ""
    gateway: str = ""
    subnet: str = ""
    region_id: str = ""


# =============================================================================
# Disks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Disk:
    """A disk as seen by callers.

    Attributes:
        size: Size in GB.
        vm_ids: Ids of the virtual machines the disk is attached to.
    """

    id: str = ""
    name: str = ""
    size: int = 0
    region_id: str = ""
    state: str = ""
    type: str = ""
    vm_ids: tuple[str, ...] = ()
    boot_disk: bool = False


@dataclass(frozen=True, slots=True)
class DiskSpec:
    """Parameters for a new disk.

    Unset name and size are left to the remote side's defaults.
    """

    region_id: str = ""
    name: str = ""
    size: int = 0


@dataclass(frozen=True, slots=True)
class DiskImage:
    """A source disk new disks can be created from."""

    disk_id: str = ""
    name: str = ""
    size: int = 0
    region_id: str = ""


@dataclass(frozen=True, slots=True)
class DiskFilter:
    id: str = ""
    region_id: str = ""
    name: str = ""
    vm_id: str = ""


# =============================================================================
# IP Addresses
# =============================================================================


@dataclass(frozen=True, slots=True)
class IPAddress:
    id: str = ""
    ip: str = ""
    region_id: str = ""
    version: int = 0
    vm_id: str = ""
    state: str = ""


@dataclass(frozen=True, slots=True)
class IPSpec:
    """Parameters for a new public IP address."""

    region_id: str = ""
    version: int = IPVersion.IPv4
    bandwidth: int = DEFAULT_BANDWIDTH


@dataclass(frozen=True, slots=True)
class PrivateIPSpec:
    """Parameters for a new IP address inside a vlan.

    An empty ip lets the remote side pick a free address in the subnet.
    """

    vlan_id: str = ""
    region_id: str = ""
    ip: str = ""
    bandwidth: int = DEFAULT_BANDWIDTH


@dataclass(frozen=True, slots=True)
class IPFilter:
    """Filter for IP listings. A version of None matches every version."""

    id: str = ""
    ip: str = ""
    region_id: str = ""
    version: int | None = None


# =============================================================================
# SSH Keys
# =============================================================================


@dataclass(frozen=True, slots=True)
class SSHKey:
    id: str = ""
    fingerprint: str = ""
    name: str = ""
    value: str = ""
