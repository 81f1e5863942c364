from __future__ import annotations

import pytest

from gandi_hosting import (
    DEFAULT_BANDWIDTH,
    IPAddress,
    IPFilter,
    IPSpec,
    IPVersion,
    ParseError,
    PrivateIPSpec,
)
from gandi_hosting.v4 import IPV4Translator

pytestmark = [pytest.mark.unit]

translator = IPV4Translator()


class TestToWireCreate:
    @pytest.mark.parametrize("version", [IPVersion.IPv4, IPVersion.IPv6])
    def test_public(self, version):
        wire = translator.to_wire_create(IPSpec(region_id="789", version=version))
        assert wire == {
            "datacenter_id": 789,
            "ip_version": int(version),
            "bandwidth": DEFAULT_BANDWIDTH,
        }

    def test_bad_version(self):
        with pytest.raises(ParseError) as exc_info:
            translator.to_wire_create(IPSpec(region_id="123", version=1234))
        assert exc_info.value.field == "version"

    def test_bad_region(self):
        with pytest.raises(ParseError) as exc_info:
            translator.to_wire_create(IPSpec(region_id="ThisisnotAnID"))
        assert exc_info.value.field == "region_id"

    def test_private(self):
        spec = PrivateIPSpec(vlan_id="987", region_id="123", ip="192.168.0.1")
        assert translator.to_wire_private_create(spec) == {
            "datacenter_id": 123,
            "bandwidth": DEFAULT_BANDWIDTH,
            "ip": "192.168.0.1",
            "vlan": 987,
        }

    def test_private_without_ip(self):
        spec = PrivateIPSpec(vlan_id="987", region_id="123")
        assert "ip" not in translator.to_wire_private_create(spec)


class TestToWireFilter:
    def test_empty_filter_is_empty(self):
        assert translator.to_wire_filter(IPFilter()) == {}

    @pytest.mark.parametrize(
        ("ip_filter", "expected"),
        [
            (IPFilter(id="102"), {"id": 102}),
            (IPFilter(ip="192.168.0.1"), {"ip": "192.168.0.1"}),
            (IPFilter(region_id="789"), {"datacenter_id": 789}),
            (IPFilter(version=IPVersion.IPv6), {"version": 6}),
        ],
    )
    def test_single_field(self, ip_filter, expected):
        assert translator.to_wire_filter(ip_filter) == expected

    def test_bad_version(self):
        with pytest.raises(ParseError) as exc_info:
            translator.to_wire_filter(IPFilter(version=5))
        assert (exc_info.value.entity, exc_info.value.field) == ("IPFilter", "version")

    @pytest.mark.parametrize("field", ["id", "region_id"])
    def test_bad_id(self, field):
        with pytest.raises(ParseError) as exc_info:
            translator.to_wire_filter(IPFilter(**{field: "ThisisnotAnID"}))
        assert exc_info.value.field == field


class TestFromWire:
    def test_converts_ids(self):
        wire = {
            "id": 1337,
            "ip": "92.243.17.196",
            "datacenter_id": 789,
            "version": 4,
            "vm_id": 0,
            "state": "created",
            "iface_id": 66,
        }
        assert translator.from_wire(wire) == IPAddress(
            id="1337",
            ip="92.243.17.196",
            region_id="789",
            version=IPVersion.IPv4,
            vm_id="0",
            state="created",
        )

    def test_missing_vm_is_zero(self):
        wire = {"id": 1, "ip": "::1", "datacenter_id": 1, "version": 6, "state": "free"}
        ip = translator.from_wire(wire)
        assert ip.vm_id == "0"
        assert ip.version is IPVersion.IPv6

    def test_round_trip_through_create_and_filter(self):
        ip = IPAddress(id="1337", ip="", region_id="789", version=IPVersion.IPv6, vm_id="0")
        created = translator.to_wire_create(IPSpec(region_id=ip.region_id, version=ip.version))
        filtered = translator.to_wire_filter(IPFilter(id=ip.id))
        wire = {**created, **filtered, "version": created["ip_version"], "state": ""}
        assert translator.from_wire(wire) == ip

    def test_private_round_trip_keeps_address(self):
        ip = IPAddress(
            id="102", ip="192.168.0.1", region_id="123", version=IPVersion.IPv4, vm_id="0"
        )
        created = translator.to_wire_private_create(
            PrivateIPSpec(vlan_id="987", region_id=ip.region_id, ip=ip.ip)
        )
        filtered = translator.to_wire_filter(IPFilter(id=ip.id))
        wire = {**created, **filtered, "version": 4, "vm_id": 0, "state": ""}
        assert translator.from_wire(wire) == ip
