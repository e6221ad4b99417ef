"""Tests for settings and engine wiring over the file-backed stores."""

import json
from datetime import UTC, datetime

from coaching_analytics.config import Settings
from coaching_analytics.main import build_engine


def make_settings(tmp_path, **overrides) -> Settings:
    return Settings(
        project_root=tmp_path,
        data_dir=tmp_path / "data",
        catalog_path=tmp_path / "catalog.yaml",
        **overrides,
    )


def write_fixtures(tmp_path):
    (tmp_path / "catalog.yaml").write_text(
        "courses:\n"
        "  - id: c1\n"
        "    title: Leadership\n"
        "    modules:\n"
        "      - id: m1\n"
        "        title: Basics\n"
        "        lessons:\n"
        "          - {id: l1, title: One}\n"
        "          - {id: l2, title: Two}\n"
    )
    data_dir = tmp_path / "data"
    (data_dir / "sessions").mkdir(parents=True)
    (data_dir / "users.json").write_text(
        json.dumps({"users": [{"id": "u1", "name": "Alice Martin"}]})
    )
    today = datetime.now(UTC).replace(hour=0, minute=30, second=0, microsecond=0)
    (data_dir / "sessions" / "s1.json").write_text(json.dumps({
        "id": "s1",
        "coach_id": "coach",
        "attendees": ["u1"],
        "start_time": today.isoformat(),
        "end_time": today.isoformat(),
        "duration": 90,
        "status": "COMPLETED",
        "assessments": [{
            "rater_id": "peer",
            "target_id": "u1",
            "leadership": 8,
            "communication": 7,
            "adaptability": 9,
            "emotional_int": 8,
        }],
    }))


class TestSettings:
    def test_defaults(self, tmp_path):
        settings = Settings(project_root=tmp_path)
        assert settings.certificate_organization == "CoachyLearning"
        assert settings.is_production is False
        assert settings.resolved_data_dir == tmp_path / "data"

    def test_relative_paths_resolve_against_root(self, tmp_path):
        settings = Settings(project_root=tmp_path, data_dir="store", catalog_path="cat.yaml")
        assert settings.resolved_data_dir == tmp_path / "store"
        assert settings.resolved_catalog_path == tmp_path / "cat.yaml"

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CERTIFICATE_ORGANIZATION", "Acme Coaching")
        monkeypatch.setenv("ENV", "production")
        settings = Settings(project_root=tmp_path)
        assert settings.certificate_organization == "Acme Coaching"
        assert settings.is_production is True


class TestBuildEngine:
    def test_end_to_end(self, tmp_path):
        write_fixtures(tmp_path)
        engine = build_engine(make_settings(tmp_path, certificate_organization="Acme"))

        engine.toggle_lesson("u1", "c1", "l1")
        result = engine.toggle_lesson("u1", "c1", "l2")
        assert result.progress == 100
        assert engine.issue_certificate("u1", "c1").organization == "Acme"

        engine.record_mood("u1", 2)
        stats = engine.compute_user_statistics("u1")
        assert stats.learning_time == "2h 0m"
        assert stats.completion_rate == "100%"
        assert stats.chart_data[-1].energy == 66
        assert stats.chart_data[-1].focus == 75

        # state lives on disk
        reopened = build_engine(make_settings(tmp_path))
        assert reopened.check_certificate_eligibility("u1", "c1") is True
