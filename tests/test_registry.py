import json

import pytest

from courtcheck.core.errors import NotFoundError
from courtcheck.core.timeutil import Interval
from courtcheck.services.registry import RegistryError, ResourceRegistry, load_registry


class TestDefaultRegistry:
    def test_demo_courts(self):
        registry = load_registry()
        assert [r.id for r in registry.all()] == ["C001", "C002"]
        assert registry.get("C001").open_hours.label() == "08:00-22:00"
        assert registry.get("C002").open_hours.label() == "09:00-21:00"

    def test_seeded_booking(self):
        registry = load_registry()
        assert registry.get("C001").bookings_on("2025-10-09") == [Interval(840, 900)]
        assert registry.get("C001").bookings_on("2025-10-10") == []


class TestLookup:
    def test_unknown_id(self, registry):
        with pytest.raises(NotFoundError) as info:
            registry.get("NOPE")
        assert info.value.resource_id == "NOPE"

    def test_contains(self, registry):
        assert "R1" in registry
        assert "NOPE" not in registry
        assert len(registry) == 2

    def test_duplicate_ids_rejected(self, make_resource):
        with pytest.raises(RegistryError, match="Duplicate"):
            ResourceRegistry([make_resource("X"), make_resource("X")])


class TestSeedFile:
    def test_load_from_json(self, tmp_path):
        path = tmp_path / "courts.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": "P1",
                        "name": "Padel 1",
                        "open": "07:00",
                        "close": "23:00",
                        "bookings": {"2099-05-01": [{"start": "07:00", "end": "08:30"}]},
                    }
                ]
            )
        )
        registry = load_registry(path)
        court = registry.get("P1")
        assert court.name == "Padel 1"
        assert court.bookings_on("2099-05-01") == [Interval(420, 510)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(RegistryError):
            load_registry(tmp_path / "missing.json")

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "courts.json"
        path.write_text(json.dumps({"id": "P1"}))
        with pytest.raises(RegistryError, match="JSON list"):
            load_registry(path)

    @pytest.mark.parametrize(
        "record",
        [
            {"id": "P1", "open": "22:00", "close": "08:00"},
            {"id": "P1", "open": "8am", "close": "22:00"},
            {"id": "P1", "bookings": {"2099-05-01": [{"start": "11:00", "end": "10:00"}]}},
            {"id": "P1", "bookings": {"tomorrow": []}},
            {"id": "P1", "peak_start": "18:00"},
            {"id": ""},
        ],
    )
    def test_invalid_records(self, record):
        with pytest.raises(RegistryError, match="index 0"):
            ResourceRegistry.from_records([record])
