"""Hosting v4 (XML-RPC) wire schema.

Example:
    from gandi_hosting import Hosting
    from gandi_hosting.v4 import V4

    hosting = Hosting(caller, schema=V4)
"""

from gandi_hosting.schema import WireSchema
from gandi_hosting.v4.disk import DiskV4Translator
from gandi_hosting.v4.ip import IPV4Translator
from gandi_hosting.v4.ssh import SSHKeyV4Translator

V4 = WireSchema(
    version="v4",
    disk=DiskV4Translator(),
    ip=IPV4Translator(),
    ssh=SSHKeyV4Translator(),
)

__all__ = ["V4", "DiskV4Translator", "IPV4Translator", "SSHKeyV4Translator"]
