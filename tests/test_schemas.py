"""Tests for configuration, constants and Pydantic schemas."""

import pytest
from pydantic import ValidationError

from transfercenter.common.config import TransferCenterConfig
from transfercenter.common.constants import BED_STATUS_SYSTEM, OccupancyStatus
from transfercenter.common.reporting import DiagnosticKind, EventReporter
from transfercenter.common.schemas import Location, StatusCoding


class TestOccupancyStatus:
    def test_codes(self) -> None:
        assert OccupancyStatus.OCCUPIED == "O"
        assert OccupancyStatus.UNOCCUPIED == "U"

    def test_display(self) -> None:
        assert OccupancyStatus.OCCUPIED.display == "Occupied"
        assert OccupancyStatus.UNOCCUPIED.display == "Unoccupied"


class TestStatusCoding:
    def test_for_status(self) -> None:
        coding = StatusCoding.for_status(OccupancyStatus.UNOCCUPIED)
        assert coding.system == BED_STATUS_SYSTEM
        assert coding.code == "U"
        assert coding.display == "Unoccupied"


class TestLocation:
    def test_from_fhir(self) -> None:
        location = Location.from_fhir(
            {
                "resourceType": "Location",
                "id": "loc-1",
                "name": "ACUTE 201",
                "description": "Room 201 on ACUTE",
                "meta": {"versionId": "7"},
                "operationalStatus": {"system": BED_STATUS_SYSTEM, "code": "O", "display": "Occupied"},
            }
        )
        assert location.id == "loc-1"
        assert location.level == "ACUTE"
        assert location.status_code == "O"
        assert location.version_id == "7"

    def test_from_fhir_without_status(self) -> None:
        location = Location.from_fhir({"resourceType": "Location", "id": "x", "name": "ED 1"})
        assert location.status_code is None
        assert location.version_id is None

    def test_from_fhir_wrong_type(self) -> None:
        with pytest.raises(ValueError, match="Location"):
            Location.from_fhir({"resourceType": "Patient", "id": "p"})

    def test_status_without_code(self) -> None:
        location = Location(id="x", name="ED 1", operationalStatus={"display": "Housekeeping"})
        assert location.status_code is None

    def test_status_must_be_coding(self) -> None:
        with pytest.raises(ValidationError):
            Location(id="x", name="ED 1", operationalStatus="O")


class TestConfig:
    def test_defaults(self) -> None:
        config = TransferCenterConfig()
        assert config.environment == "dev"
        assert config.log_level == "INFO"
        assert config.ack_sending_application == "TRANSFER-CENTER"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRANSFER_CENTER_FHIR_BASE_URL", "https://fhir.example.org")
        monkeypatch.setenv("transfer_center_log_level", "DEBUG")
        config = TransferCenterConfig()
        assert config.fhir_base_url == "https://fhir.example.org"
        assert config.log_level == "DEBUG"

    def test_invalid_environment(self) -> None:
        with pytest.raises(ValidationError):
            TransferCenterConfig(environment="qa")  # type: ignore[arg-type]


class TestEventReporter:
    def test_warning_kinds_logged_as_warnings(self, caplog: pytest.LogCaptureFixture) -> None:
        reporter = EventReporter()
        with caplog.at_level("INFO", logger="transfercenter.common.reporting"):
            reporter.report(DiagnosticKind.LOCATION_NOT_FOUND, "No Location named 'ED 9'", "ED 9")
            reporter.report(DiagnosticKind.IGNORED, "Ignoring ADT^A02")

        assert [r.levelname for r in caplog.records] == ["WARNING", "INFO"]
        assert len(reporter.warnings) == 1
        assert reporter.warnings[0].location_name == "ED 9"

    def test_clear(self) -> None:
        reporter = EventReporter()
        reporter.report(DiagnosticKind.IGNORED, "x")
        reporter.clear()
        assert reporter.diagnostics == []
