"""Unit tests for history documents."""

import json
from pathlib import Path

import pytest

from cadence.errors import InvalidRange
from cadence.history import load_history, parse_history

DOCUMENT = {
    "time_zone": "America/Denver",
    "activity_types": [
        {"id": "run", "name": "Running", "desiredFrequency": 2, "tagId": "outdoor"},
        {"id": "read", "name": "Reading", "desiredFrequency": 3},
    ],
    "activities": [
        {"typeId": "run", "date": "2024-03-01T14:00:00Z"},
        {"typeId": "swim", "date": "2024-03-02T14:00:00Z"},
    ],
    "off_times": [{"startDate": "2024-03-10", "endDate": "2024-03-12", "tagId": "outdoor"}],
}


class TestParseHistory:
    """Tests for parse_history."""

    def test_parses_entries(self) -> None:
        history = parse_history(DOCUMENT)

        assert history.time_zone == "America/Denver"
        assert [t.id for t in history.activity_types] == ["run", "read"]
        assert len(history.off_times) == 1

    def test_tags_derived_from_types(self) -> None:
        """Without a tags map, membership comes from the activity types."""
        assert parse_history(DOCUMENT).tag_members == {"outdoor": ["run"]}

    def test_explicit_tags(self) -> None:
        history = parse_history({**DOCUMENT, "tags": {"outdoor": ["run", "read"]}})
        assert history.tag_members == {"outdoor": ["run", "read"]}

    def test_unknown_types_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Activities for types not in the document are ignored with a warning."""
        history = parse_history(DOCUMENT)

        assert [r.activity_type_id for r in history.records] == ["run"]
        assert "swim" in caplog.text

    def test_reversed_off_time(self) -> None:
        document = {"off_times": [{"startDate": "2024-03-12", "endDate": "2024-03-10"}]}
        with pytest.raises(InvalidRange):
            parse_history(document)

    @pytest.mark.parametrize(
        "document",
        [
            {"tags": ["outdoor"]},
            {"tags": {"outdoor": "run"}},
            {"activities": ["oops"]},
            {"activity_types": {"id": "run"}},
            {"off_times": [["2024-03-10", "2024-03-12"]]},
            {"time_zone": 5},
        ],
    )
    def test_malformed_sections(self, document: dict) -> None:
        """Sections of the wrong shape raise ValueError."""
        with pytest.raises(ValueError):
            parse_history(document)

    def test_empty_document(self) -> None:
        history = parse_history({})
        assert history.activity_types == []
        assert history.time_zone is None


class TestLoadHistory:
    """Tests for load_history."""

    def test_load_json(self, tmp_path: Path) -> None:
        """JSON documents load through the YAML parser."""
        path = tmp_path / "history.json"
        path.write_text(json.dumps(DOCUMENT))

        history = load_history(path)

        assert len(history.records) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_history(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "history.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            load_history(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Parser errors surface as ValueError."""
        path = tmp_path / "history.yaml"
        path.write_text("activity_types: [\n  - {id: run\n")
        with pytest.raises(ValueError, match="not valid YAML"):
            load_history(path)
