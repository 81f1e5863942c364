"""IP addresses and SSH keys.

Allocates a public IPv6 address, lists every address in the same region,
then registers an SSH key and looks it up by name. Waits are bounded by a
cancel event so Ctrl-C stops polling without leaving the process stuck.
"""

import signal
import threading
from pathlib import Path

from gandi_hosting import Hosting, IPFilter, IPSpec, IPVersion, resolve_config


def main() -> None:
    cancel = threading.Event()
    signal.signal(signal.SIGINT, lambda *_: cancel.set())

    hosting = Hosting.from_config(resolve_config())

    ip = hosting.ips.create(IPSpec(region_id="3", version=IPVersion.IPv6), cancel=cancel)
    for other in hosting.ips.describe(IPFilter(region_id=ip.region_id)):
        print(f"{other.id:>8} {other.ip:<40} {other.state}")
    hosting.ips.delete(ip, cancel=cancel)

    public_key = (Path.home() / ".ssh" / "id_ed25519.pub").read_text().strip()
    key = hosting.keys.create("example", public_key)
    print(f"registered {hosting.keys.from_name('example').fingerprint}")
    hosting.keys.delete(key)


if __name__ == "__main__":
    main()
