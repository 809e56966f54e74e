"""Tests for the inventory file adapter."""

import logging
import tempfile
from pathlib import Path

import pytest

from marina.models.boat import Boat, create_boat
from marina.models.errors import InventoryFileError, MalformedLineError, UnknownLocationError
from marina.models.location import (
    LandLocation,
    LocationKind,
    SlipLocation,
    StorageLocation,
    TrailorLocation,
    UnknownLocation,
)
from marina.services.inventory import MarinaInventory
from marina.storage.csv_store import (
    decode_line,
    format_boat_line,
    load_inventory,
    parse_boat_line,
    save_inventory,
    split_fields,
)

SAMPLE = """\
Serenity,30,slip,12,250.00
Big Brother,26.5,land,Bay C,0
Nine Lives,18,trailor,ABC123456,12.75
Peace Pipe,22,storage,7,-3.5
"""


class TestParseBoatLine:
    def test_slip(self):
        boat = parse_boat_line("Serenity,30,slip,12,250.00\n")
        assert boat.name == "Serenity"
        assert boat.size == 30.0
        assert boat.location == SlipLocation(12)
        assert boat.amount_owed == 250.0

    def test_detail_parsing_per_kind(self):
        assert parse_boat_line("a,1,land,Bay C,0").location == LandLocation("B")
        assert parse_boat_line("a,1,trailor,ABC123456,0").location == TrailorLocation("ABC12")
        assert parse_boat_line("a,1,storage,x9,0").location == StorageLocation(0)

    def test_permissive_numbers(self):
        boat = parse_boat_line("Odd,big,slip,3,lots")
        assert boat.size == 0.0
        assert boat.amount_owed == 0.0

    def test_too_few_fields(self):
        with pytest.raises(MalformedLineError, match="expected 5 fields"):
            parse_boat_line("Serenity,30,slip,12")

    def test_empty_fields_collapse(self):
        assert split_fields("a,,b,\r\n") == ["a", "b"]
        with pytest.raises(MalformedLineError):
            parse_boat_line("Serenity,30,,slip,12")

    def test_extra_fields_ignored(self):
        boat = parse_boat_line("Serenity,30,slip,12,250,extra")
        assert boat.amount_owed == 250.0

    def test_unknown_location(self):
        with pytest.raises(UnknownLocationError) as exc:
            parse_boat_line("Serenity,30,dock,12,250")
        assert exc.value.token == "dock"
        assert isinstance(exc.value, MalformedLineError)

    def test_location_token_case_sensitive(self):
        with pytest.raises(UnknownLocationError):
            parse_boat_line("Serenity,30,Slip,12,250")


class TestFormatBoatLine:
    def test_two_decimals(self):
        boat = create_boat("Serenity", 30, 250, LocationKind.SLIP)
        boat.set_location_detail("12")
        assert format_boat_line(boat) == "Serenity,30.00,slip,12,250.00"

    def test_each_kind(self):
        land = Boat("L", 10, 1.005, LandLocation("B"))
        trailor = Boat("T", 10.333, 0, TrailorLocation("XY12"))
        storage = Boat("S", 9, -4.5, StorageLocation(41))
        assert format_boat_line(land) == "L,10.00,land,B,1.00"
        assert format_boat_line(trailor) == "T,10.33,trailor,XY12,0.00"
        assert format_boat_line(storage) == "S,9.00,storage,41,-4.50"

    def test_unknown_sentinels(self):
        ghost = Boat("Ghost", 12, 0, UnknownLocation())
        assert format_boat_line(ghost) == "Ghost,12.00,unknown,?,0.00"


class TestLoadInventory:
    def test_load_sample(self, tmp_path):
        path = tmp_path / "boats.csv"
        path.write_text(SAMPLE)
        inv = MarinaInventory(capacity=10)
        assert load_inventory(path, inv) == 4
        assert [b.name for b in inv] == ["Big Brother", "Nine Lives", "Peace Pipe", "Serenity"]

    def test_bad_lines_skipped(self, tmp_path, caplog):
        path = tmp_path / "boats.csv"
        path.write_text(
            "Serenity,30,slip,12,250.00\n"
            "Broken,30,slip\n"
            "Dinghy,8,dock,4,0\n"
            "\n"
            "Zed,10,land,Q,5\n"
        )
        inv = MarinaInventory(capacity=10)
        with caplog.at_level(logging.WARNING):
            count = load_inventory(path, inv)
        assert count == 2
        assert [b.name for b in inv] == ["Serenity", "Zed"]
        assert "Broken,30,slip" in caplog.text
        assert "Unknown location 'dock'" in caplog.text

    def test_full_store_skips_rest(self, tmp_path, caplog):
        path = tmp_path / "boats.csv"
        path.write_text(SAMPLE)
        inv = MarinaInventory(capacity=2)
        with caplog.at_level(logging.WARNING):
            assert load_inventory(path, inv) == 2
        assert len(inv) == 2
        assert "Marina is full" in caplog.text

    def test_missing_file(self, tmp_path):
        inv = MarinaInventory(capacity=2)
        with pytest.raises(InventoryFileError, match="for reading"):
            load_inventory(tmp_path / "nope.csv", inv)
        assert len(inv) == 0

    def test_windows_line_endings(self, tmp_path):
        path = tmp_path / "boats.csv"
        path.write_bytes(b"Serenity,30,slip,12,250.00\r\n")
        inv = MarinaInventory(capacity=2)
        assert load_inventory(path, inv) == 1
        assert inv[0].amount_owed == 250.0

    def test_non_utf8_line_skipped(self, tmp_path, caplog):
        path = tmp_path / "boats.csv"
        path.write_bytes(b"Alpha,20,slip,3,0\nSe\xf1orita,25,land,B,10\nZed,30,slip,4,0\n")
        inv = MarinaInventory(capacity=10)
        with caplog.at_level(logging.WARNING):
            assert load_inventory(path, inv) == 2
        assert [b.name for b in inv] == ["Alpha", "Zed"]
        assert "Ignoring invalid line 2" in caplog.text

    def test_decode_line(self):
        assert decode_line("Señorita,1,slip,1,0\n".encode("utf-8")) == "Señorita,1,slip,1,0\n"
        with pytest.raises(MalformedLineError, match="not valid UTF-8"):
            decode_line(b"Se\xf1orita,25,land,B,10\n")


class TestSaveInventory:
    def test_save_writes_in_order(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            inv = MarinaInventory(capacity=5)
            inv.insert(Boat("Zed", 10, 0, LandLocation("Q")))
            inv.insert(Boat("Alpha", 20.5, 12.346, SlipLocation(3)))
            path = Path(tmpdir) / "out.csv"
            save_inventory(path, inv)
            assert path.read_text() == (
                "Alpha,20.50,slip,3,12.35\n"
                "Zed,10.00,land,Q,0.00\n"
            )

    def test_save_empty_truncates(self, tmp_path):
        path = tmp_path / "out.csv"
        path.write_text("old contents\n")
        save_inventory(path, MarinaInventory(capacity=1))
        assert path.read_text() == ""

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(InventoryFileError, match="for writing"):
            save_inventory(tmp_path / "missing_dir" / "out.csv", MarinaInventory(capacity=1))

    def test_round_trip(self, tmp_path):
        path = tmp_path / "boats.csv"
        path.write_text(SAMPLE)
        first = MarinaInventory(capacity=10)
        load_inventory(path, first)
        save_inventory(path, first)

        second = MarinaInventory(capacity=10)
        assert load_inventory(path, second) == len(first)
        for a, b in zip(first, second):
            assert a.name == b.name
            assert round(a.size, 2) == round(b.size, 2)
            assert a.location == b.location
            assert round(a.amount_owed, 2) == round(b.amount_owed, 2)
