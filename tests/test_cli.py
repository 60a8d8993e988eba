"""Tests for postsmith/__main__.py — CLI commands."""

import json
from datetime import datetime
from unittest.mock import patch

import pytest

from postsmith.__main__ import main
from postsmith.trending.fallback import fallback_snapshot

SNAPSHOT = fallback_snapshot(datetime(2026, 10, 19, 9, 0))


class TestTrendingCommand:
    @patch("postsmith.trending.TrendingAggregator.get_trending", return_value=SNAPSHOT)
    @patch("postsmith.trending.engine.load_sources", return_value=[])
    def test_json_output(self, mock_sources, mock_get, capsys):
        main(["trending", "--json"])
        out = json.loads(capsys.readouterr().out)

        assert out["success"] is True
        assert out["data"]["source"] == "fallback"
        assert out["data"]["currentEvents"][0] == "Breaking tech industry news"

    @patch("postsmith.trending.TrendingAggregator.get_trending", return_value=SNAPSHOT)
    @patch("postsmith.trending.engine.load_sources", return_value=[])
    def test_text_output_respects_limit(self, mock_sources, mock_get, capsys):
        main(["trending", "--limit", "2"])
        out = capsys.readouterr().out

        assert "Morning productivity tips" in out
        assert "Coffee culture trends" in out
        assert "Early bird success stories" not in out


class TestStylesCommand:
    def test_lists_bundled_styles(self, capsys):
        main(["styles"])
        assert "storyteller" in capsys.readouterr().out


class TestGenerateCommand:
    @patch("postsmith.generate._call_claude", return_value="A fine post.")
    def test_generate_without_trending(self, mock_claude, capsys):
        main(["generate", "--topic", "AI", "--style", "hype", "--no-trending"])
        assert "A fine post." in capsys.readouterr().out

    @patch("postsmith.generate._call_claude")
    def test_unknown_style_exits(self, mock_claude, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["generate", "--topic", "AI", "--style", "nope", "--no-trending"])
        assert exc.value.code == 1
        assert "Invalid style selected" in capsys.readouterr().out
