"""SSH key operations.

Key calls are synchronous on the remote side, so no operation is tracked.
Listings only return ids and names; the fingerprint and value of each key
come from one extra hosting.ssh.info call per key.
"""

from __future__ import annotations

from loguru import logger

from gandi_hosting.exceptions import NotProvidedError, RemoteError
from gandi_hosting.protocols import Caller, SSHKeyTranslator
from gandi_hosting.types import SSHKey


class SSHKeyClient:
    def __init__(self, caller: Caller, translator: SSHKeyTranslator) -> None:
        self._caller = caller
        self._translator = translator
        self._log = logger.bind(component="ssh", schema=translator.version)

    def create(self, name: str, value: str) -> SSHKey:
        """Register the public key ``value`` under ``name``."""
        if not name:
            raise NotProvidedError("create", "SSHKey", "name")
        if not value:
            raise NotProvidedError("create", "SSHKey", "value")

        self._log.info("Creating SSH key {name}", name=name)
        params = self._translator.to_wire_create(name, value)
        created = self._caller.send("hosting.ssh.create", [params])
        return self._read(created["id"])

    def delete(self, key: SSHKey) -> None:
        fn = "delete"
        if not key.id:
            raise NotProvidedError(fn, "SSHKey", "id")
        key_id = self._translator.parse_id(key.id, "SSHKey", "id", fn)

        self._log.info("Deleting SSH key {id}", id=key.id)
        if not self._caller.send("hosting.ssh.delete", [key_id]):
            raise RemoteError("hosting.ssh.delete", f"SSH key {key.id} was not deleted")

    def list_all(self) -> list[SSHKey]:
        """List every key with its value, in remote order."""
        summaries = self._caller.send("hosting.ssh.list", [])
        return [self._read(summary["id"]) for summary in summaries]

    def from_id(self, key_id: str) -> SSHKey:
        """Return the key with id ``key_id``, or an empty SSHKey if none.

        hosting.ssh.list cannot filter by id, so the id is matched against
        the full listing before fetching the key.

        Raises:
            ParseError: ``key_id`` is not a decimal id.
        """
        if not key_id:
            return SSHKey()
        wanted = self._translator.parse_id(key_id, "SSHKey", "id", "from_id")
        summaries = self._caller.send("hosting.ssh.list", [])
        if not any(summary["id"] == wanted for summary in summaries):
            return SSHKey()
        return self._read(wanted)

    def from_name(self, name: str) -> SSHKey:
        """Return the key named ``name``, or an empty SSHKey if none."""
        if not name:
            return SSHKey()
        summaries = self._caller.send("hosting.ssh.list", [self._translator.to_wire_filter(name)])
        if not summaries:
            return SSHKey()
        return self._read(summaries[0]["id"])

    def _read(self, key_id: int) -> SSHKey:
        return self._translator.from_wire(self._caller.send("hosting.ssh.info", [key_id]))
