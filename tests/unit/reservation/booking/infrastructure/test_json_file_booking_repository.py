import json
from unittest.mock import patch

import pytest

from reservation.booking.infrastructure.json_file_booking_repository import (
    JsonFileBookingRepository,
)
from reservation.shared.domain.exception import PersistenceException


class TestJsonFileBookingRepository:
    def test_missing_slot_returns_none(self, tmp_path):
        repository = JsonFileBookingRepository(directory=tmp_path)
        assert repository.load_all() is None

    def test_save_and_load(self, tmp_path, create_booking):
        repository = JsonFileBookingRepository(directory=tmp_path, slot="bookings")
        bookings = [create_booking(booking_id="a"), create_booking(booking_id="b")]

        repository.save_all(bookings)

        assert repository.path == tmp_path / "bookings.json"
        assert list(json.loads(repository.path.read_text(encoding="utf-8"))) == ["a", "b"]
        assert repository.load_all() == bookings
        assert list(tmp_path.glob("*.tmp")) == []

    def test_creates_missing_directory(self, tmp_path, create_booking):
        repository = JsonFileBookingRepository(directory=tmp_path / "nested" / "dir")
        repository.save_all([create_booking()])
        assert repository.path.exists()

    def test_reads_configuration_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BOOKING_STORAGE_DIR", str(tmp_path))
        monkeypatch.setenv("BOOKING_STORAGE_SLOT", "front_desk")

        repository = JsonFileBookingRepository()

        assert repository.path == tmp_path / "front_desk.json"

    def test_corrupt_file_raises_persistence_exception(self, tmp_path):
        repository = JsonFileBookingRepository(directory=tmp_path)
        repository.path.write_text("{not json", encoding="utf-8")

        with pytest.raises(PersistenceException):
            repository.load_all()

    def test_write_failure_raises_persistence_exception(self, tmp_path, create_booking):
        repository = JsonFileBookingRepository(directory=tmp_path)

        with patch(
            "reservation.booking.infrastructure.json_file_booking_repository.os.replace",
            side_effect=OSError("read-only file system"),
        ):
            with pytest.raises(PersistenceException, match="Cannot write"):
                repository.save_all([create_booking()])

        assert not repository.path.exists()
        assert list(tmp_path.glob("*.tmp")) == []

    def test_save_syncs_file_before_replace(self, tmp_path, create_booking):
        repository = JsonFileBookingRepository(directory=tmp_path)
        calls = []
        module = "reservation.booking.infrastructure.json_file_booking_repository"

        with patch(f"{module}.os.fsync", side_effect=lambda fd: calls.append("fsync")), \
                patch(f"{module}.os.replace", side_effect=lambda *a: calls.append("replace")):
            repository.save_all([create_booking()])

        assert calls == ["fsync", "replace"]
