"""Hosting facade.

Hosting wires one caller, one wire schema and one operation tracker into
the per-resource clients.

Example:
    hosting = Hosting.from_config(resolve_config())
    disk = hosting.disks.create(DiskSpec(region_id="3", name="data", size=20))
    hosting.disks.delete(disk)
"""

from __future__ import annotations

from gandi_hosting.caller import XmlRpcCaller
from gandi_hosting.config import HostingConfig
from gandi_hosting.disks import DiskClient
from gandi_hosting.ips import IPClient
from gandi_hosting.operation import OperationTracker
from gandi_hosting.protocols import Caller
from gandi_hosting.schema import WireSchema
from gandi_hosting.ssh_keys import SSHKeyClient
from gandi_hosting.v4 import V4


class Hosting:
    """Entry point to the hosting API.

    Args:
        caller: Remote call primitive. Each Hosting owns its own reference.
        schema: Wire schema spoken by ``caller``'s endpoint.
        tracker: Operation tracker. Defaults to one polling ``caller`` every
            5 seconds with no timeout.
    """

    def __init__(
        self,
        caller: Caller,
        *,
        schema: WireSchema = V4,
        tracker: OperationTracker | None = None,
    ) -> None:
        self.caller = caller
        self.schema = schema
        self.tracker = tracker or OperationTracker(caller)
        self.disks = DiskClient(caller, schema.disk, self.tracker)
        self.ips = IPClient(caller, schema.ip, self.tracker)
        self.keys = SSHKeyClient(caller, schema.ssh)

    @classmethod
    def from_config(cls, config: HostingConfig, *, schema: WireSchema = V4) -> Hosting:
        """Build a Hosting talking XML-RPC to ``config.url``.

        Raises:
            ConfigurationError: No API key is configured.
        """
        caller = XmlRpcCaller(
            config.url, config.require_api_key(), timeout=config.request_timeout
        )
        tracker = OperationTracker(
            caller,
            poll_interval=config.poll_interval,
            timeout=config.operation_timeout,
            failure_statuses=config.failure_statuses,
        )
        return cls(caller, schema=schema, tracker=tracker)
