"""
Tests for scripts/recommend_outfit.py.
"""

import importlib.util
import json
import logging
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "recommend_outfit.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("recommend_outfit", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestLoadWardrobe:
    def test_missing_file_is_empty(self, script, tmp_path):
        assert script.load_wardrobe(tmp_path / "nope.json") == []

    def test_records_are_loaded(self, script, tmp_path, sample_records):
        path = tmp_path / "wardrobe.json"
        path.write_text(json.dumps(sample_records), encoding="utf-8")

        wardrobe = script.load_wardrobe(path)

        assert len(wardrobe) == len(sample_records)

    def test_malformed_json_exits_cleanly(self, script, tmp_path):
        path = tmp_path / "wardrobe.json"
        path.write_text("[{\"id\": \"tee\",", encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            script.load_wardrobe(path)

        assert "not valid JSON" in str(exc.value)

    def test_non_list_exits_cleanly(self, script, tmp_path):
        path = tmp_path / "wardrobe.json"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            script.load_wardrobe(path)

        assert "expected a JSON list" in str(exc.value)


class TestMain:
    def test_prints_outfit_json(self, script, tmp_path, sample_records, monkeypatch, capsys):
        path = tmp_path / "wardrobe.json"
        path.write_text(json.dumps(sample_records), encoding="utf-8")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setattr(
            "sys.argv",
            ["recommend_outfit.py", "--wardrobe", str(path), "--temperature", "10", "--location", "ist"],
        )
        script.get_settings.cache_clear()

        try:
            script.main()
        finally:
            script.get_settings.cache_clear()

        result = json.loads(capsys.readouterr().out)
        assert result["weather"] == "cold"
        assert set(result) >= {"top", "bottom", "outer", "shoes", "missing_slots"}
        assert logging.getLogger().level == logging.WARNING
