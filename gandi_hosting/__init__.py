"""gandi_hosting - stable client for the Gandi hosting API.

Example:

    from gandi_hosting import DiskSpec, Hosting, resolve_config

    hosting = Hosting.from_config(resolve_config())

    disk = hosting.disks.create(DiskSpec(region_id="3", name="data", size=20))
    disk = hosting.disks.extend(disk, 10)
    hosting.disks.delete(disk)
"""

from gandi_hosting.caller import OTE_URL, PRODUCTION_URL, XmlRpcCaller
from gandi_hosting.config import HostingConfig, load_config, resolve_config
from gandi_hosting.disks import DiskClient
from gandi_hosting.exceptions import (
    ConfigurationError,
    HostingError,
    InputError,
    MismatchError,
    NotProvidedError,
    OperationCancelledError,
    OperationError,
    OperationFailedError,
    OperationTimeoutError,
    ParseError,
    RemoteError,
)
from gandi_hosting.hosting import Hosting
from gandi_hosting.ips import IPClient
from gandi_hosting.logging import LogConfig, setup_logging, teardown_logging
from gandi_hosting.operation import Operation, OperationInfo, OperationState, OperationTracker
from gandi_hosting.protocols import Caller
from gandi_hosting.schema import WireSchema
from gandi_hosting.ssh_keys import SSHKeyClient
from gandi_hosting.types import (
    DEFAULT_BANDWIDTH,
    Disk,
    DiskFilter,
    DiskImage,
    DiskSpec,
    IPAddress,
    IPFilter,
    IPSpec,
    IPVersion,
    PrivateIPSpec,
    Region,
    SSHKey,
    Vlan,
)

__version__ = "0.1.0"

__all__ = [
    # Facade
    "Hosting",
    "DiskClient",
    "IPClient",
    "SSHKeyClient",
    # Transport
    "Caller",
    "XmlRpcCaller",
    "PRODUCTION_URL",
    "OTE_URL",
    "WireSchema",
    # Operations
    "Operation",
    "OperationInfo",
    "OperationState",
    "OperationTracker",
    # Domain model
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
    # Configuration
    "HostingConfig",
    "load_config",
    "resolve_config",
    "LogConfig",
    "setup_logging",
    "teardown_logging",
    # Errors
    "HostingError",
    "ConfigurationError",
    "InputError",
    "NotProvidedError",
    "ParseError",
    "MismatchError",
    "RemoteError",
    "OperationError",
    "OperationFailedError",
    "OperationTimeoutError",
    "OperationCancelledError",
]
