"""SSH key translation for the v4 wire schema.

Keys only differ from the domain model by their integer id.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gandi_hosting.types import SSHKey
from gandi_hosting.v4.parsing import id_str, parse_id
from gandi_hosting.v4.types import SSHKeyCreateV4, SSHKeyFilterV4


class SSHKeyV4Translator:
    version = "v4"

    def parse_id(self, value: str, entity: str, field: str, fn: str) -> int:
        return parse_id(value, entity, field, fn)

    def to_wire_create(self, name: str, value: str) -> SSHKeyCreateV4:
        return {"name": name, "value": value}

    def to_wire_filter(self, name: str = "") -> SSHKeyFilterV4:
        return {"name": name} if name else {}

    def from_wire(self, wire: Mapping[str, Any]) -> SSHKey:
        return SSHKey(
            id=id_str(wire.get("id")),
            fingerprint=wire.get("fingerprint") or "",
            name=wire.get("name") or "",
            value=wire.get("value") or "",
        )
