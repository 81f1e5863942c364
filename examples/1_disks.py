"""Disk lifecycle.

Creates a data disk, grows it, renames it and deletes it. Every mutation
blocks until the hosting operation is done.

Needs GANDI_API_KEY in the environment (or api_key in gandi.toml).
Point GANDI_URL at the OTE endpoint to try it without billing.
"""

from gandi_hosting import DiskSpec, Hosting, LogConfig, resolve_config, setup_logging


def main() -> None:
    setup_logging(LogConfig(level="DEBUG"))
    hosting = Hosting.from_config(resolve_config())

    disk = hosting.disks.create(DiskSpec(region_id="3", name="scratch", size=10))
    print(f"created {disk.name} ({disk.size}GB) id={disk.id}")

    disk = hosting.disks.extend(disk, 5)
    disk = hosting.disks.rename(disk, "scratch-big")
    print(f"now {disk.name} ({disk.size}GB)")

    hosting.disks.delete(disk)


if __name__ == "__main__":
    main()
