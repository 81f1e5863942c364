"""Wire schema bundles.

A WireSchema groups the translators of one wire protocol version. The
schema is picked when a Hosting client is built; choosing it is up to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from gandi_hosting.protocols import DiskTranslator, IPTranslator, SSHKeyTranslator


@dataclass(frozen=True, slots=True)
class WireSchema:
    version: str
    disk: DiskTranslator
    ip: IPTranslator
    ssh: SSHKeyTranslator
