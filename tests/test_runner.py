"""Tests for applying an invocation to the store."""

from pathlib import Path

import pytest

from hgidr.config import TrackerConfig
from hgidr.exceptions import SeriesNotFoundError
from hgidr.runner import Intent, TrackerRunner, apply_intent
from hgidr.store import Record, SeriesStore


class TestIntent:
    def test_defaults(self):
        """Flags default to off, integers to 0."""
        intent = Intent(name="Foo")
        assert intent.new_series is False
        assert intent.increment_episode is False
        assert intent.increment_season is False
        assert intent.set_episode == 0
        assert intent.set_season == 0


class TestApplyIntent:
    def test_new_series_echoes_confirmation(self):
        store = SeriesStore()
        lines = []
        record = apply_intent(store, Intent(name="Foo", new_series=True), echo=lines.append)
        assert record == Record(1, 1)
        assert lines == ["Creating Foo"]

    def test_new_series_combined_with_increment(self):
        """Mutations still apply after creation."""
        store = SeriesStore({"Foo": Record(4, 8)})
        record = apply_intent(
            store, Intent(name="Foo", new_series=True, increment_episode=True), echo=lambda _: None
        )
        assert record == Record(1, 2)

    def test_increment_season_before_set_episode(self):
        store = SeriesStore({"Foo": Record(2, 5)})
        record = apply_intent(store, Intent(name="Foo", increment_season=True, set_episode=7))
        assert record == Record(3, 7)

    def test_increment_episode_before_increment_season(self):
        store = SeriesStore({"Foo": Record(2, 5)})
        record = apply_intent(store, Intent(name="Foo", increment_episode=True, increment_season=True))
        assert record == Record(3, 1)

    def test_set_season_and_set_episode(self):
        store = SeriesStore({"Foo": Record(1, 1)})
        record = apply_intent(store, Intent(name="Foo", set_episode=3, set_season=10))
        assert record == Record(10, 3)

    def test_report_only(self):
        store = SeriesStore({"Foo": Record(2, 5)})
        assert apply_intent(store, Intent(name="Foo")) == Record(2, 5)

    def test_unknown_series(self):
        with pytest.raises(SeriesNotFoundError):
            apply_intent(SeriesStore(), Intent(name="Foo", increment_episode=True))


class TestTrackerRunner:
    @pytest.fixture
    def runner(self, data_path: Path):
        lines = []
        runner = TrackerRunner(TrackerConfig(data_path=data_path), echo=lines.append)
        runner.lines = lines
        return runner

    def test_run_persists_and_reports(self, runner, write_data, read_data):
        write_data({"Foo": {"Season": 2, "Episode": 5}})
        record = runner.run(Intent(name="Foo", increment_episode=True))
        assert record == Record(2, 6)
        assert runner.lines == ["Season 2 Episode 6"]
        assert read_data() == {"Foo": {"Season": 2, "Episode": 6}}

    def test_failed_run_leaves_file_untouched(self, runner, write_data, data_path: Path):
        write_data({"Foo": {"Season": 2, "Episode": 5}})
        before = data_path.read_text()
        with pytest.raises(SeriesNotFoundError):
            runner.run(Intent(name="Bar", increment_episode=True))
        assert data_path.read_text() == before

    def test_run_with_export(self, runner, write_data, tmp_path: Path):
        write_data({"Foo": {"Season": 2, "Episode": 5}})
        runner.run(Intent(name="Foo"), export_path=tmp_path / "out.json")
        assert (tmp_path / "out.json").exists()

    def test_export_only(self, runner, write_data, tmp_path: Path):
        write_data({"Foo": {"Season": 2, "Episode": 5}, "Bar": {"Season": 1, "Episode": 1}})
        assert runner.export_only(tmp_path / "out.yaml") == 2
        assert runner.lines == []
