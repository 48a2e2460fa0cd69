"""Tests for loading benchmark catalogues and the barbell lift vocabulary."""
import json

import pytest

from wod_parser_api.config import settings
from wod_parser_api.parsers.models import SourceCatalogue
from wod_parser_api.services.reference_data import (
    BenchmarkLiftIndex,
    ReferenceDataError,
    build_reference_data,
    get_reference_data,
    load_reference_data,
)


MINIMAL_PAYLOAD = {
    "girl_benchmarks": [
        {"id": 6, "name": "Fran", "description": "21-15-9:\nThrusters\nPull-ups",
         "barbell_lifts": ["Thruster"]},
    ],
    "hero_benchmarks": [],
    "barbell_lifts": [
        {"id": 24, "lift_name": "Thruster", "category": "olympic_lift", "lift_type": "olympic_composite"},
    ],
}


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "reference.json"
    path.write_text(json.dumps(MINIMAL_PAYLOAD), encoding="utf-8")
    return path


class TestBundledData:
    """The reference data file shipped with the package."""

    def test_loads(self):
        data = load_reference_data()

        assert len(data.girl_benchmarks) == 16
        assert len(data.hero_benchmarks) == 7
        assert len(data.notable_benchmarks) == 3
        assert len(data.barbell_vocabulary) == 26

    def test_girls_come_first(self):
        names = load_reference_data().all_benchmark_names()

        assert names[0] == "Angie"
        assert names.index("Fran") < names.index("Murph") < names.index("Filthy Fifty")

    def test_benchmark_lifts_resolve(self):
        data = load_reference_data()
        vocabulary = {lift.lift_name for lift in data.barbell_vocabulary}

        for catalogue, entries in data.catalogues():
            for entry in entries:
                for row in data.get_lifts_for_benchmark(entry.id, catalogue):
                    assert row["lift_name"] in vocabulary

    def test_fran_uses_thrusters(self):
        data = load_reference_data()
        assert data.get_lifts_for_benchmark(6, SourceCatalogue.GIRL) == [{"lift_name": "Thruster"}]


class TestLoadReferenceData:
    """Test cases for load_reference_data()."""

    def test_explicit_path(self, data_file):
        data = load_reference_data(str(data_file))

        assert data.all_benchmark_names() == ["Fran"]
        assert data.notable_benchmarks == []
        assert data.get_lifts_for_benchmark(6, SourceCatalogue.GIRL) == [{"lift_name": "Thruster"}]
        assert data.get_lifts_for_benchmark(6, SourceCatalogue.HERO) == []

    def test_path_from_settings(self, data_file, monkeypatch):
        monkeypatch.setattr(settings, "REFERENCE_DATA_PATH", str(data_file))
        assert load_reference_data().all_benchmark_names() == ["Fran"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReferenceDataError, match="not found"):
            load_reference_data(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ReferenceDataError, match="not valid JSON"):
            load_reference_data(str(path))

    def test_cached(self):
        get_reference_data.cache_clear()
        try:
            assert get_reference_data() is get_reference_data()
        finally:
            get_reference_data.cache_clear()


class TestBuildReferenceData:
    """Test cases for build_reference_data()."""

    def test_not_an_object(self):
        with pytest.raises(ReferenceDataError):
            build_reference_data([])

    def test_row_missing_name(self):
        with pytest.raises(ReferenceDataError, match="Malformed"):
            build_reference_data({"girl_benchmarks": [{"id": 1}]})

    def test_row_not_a_mapping(self):
        with pytest.raises(ReferenceDataError):
            build_reference_data({"barbell_lifts": [["Thruster"]]})

    def test_empty_payload(self):
        data = build_reference_data({})
        assert data.all_benchmark_names() == []
        assert data.barbell_vocabulary == []


class TestBenchmarkLiftIndex:
    """Test cases for BenchmarkLiftIndex."""

    def test_lookup_by_catalogue_value(self):
        index = BenchmarkLiftIndex()
        index.add(SourceCatalogue.NOTABLE, 1, ["Push Press", "Deadlift"])

        assert index(1, "notable") == [{"lift_name": "Push Press"}, {"lift_name": "Deadlift"}]
        assert index(1, SourceCatalogue.GIRL) == []
