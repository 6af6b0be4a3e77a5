from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from interviewresults.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def interview(
    interview_id: int,
    name: str,
    email: str,
    job_id: int,
    job_title: str,
    responses: list[dict[str, Any]],
    **kwargs: Any,
) -> dict[str, Any]:
    payload = {
        "id": interview_id,
        "interviewerName": "Alice Wong",
        "skeletonName": "Technical Screen",
        "status": "COMPLETED",
        "completedAt": f"2024-05-0{interview_id}T10:00:00",
        "responses": responses,
        "application": {
            "candidateName": name,
            "candidateEmail": email,
            "jobId": job_id,
            "jobTitle": job_title,
        },
    }
    payload.update(kwargs)
    return payload


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    snapshot = {
        "interviews": [
            interview(1, "John Smith", "john@example.com", 1, "Backend Engineer", [{"title": "Coding", "rating": 80}]),
            interview(2, "John Smith", "john@example.com", 1, "Backend Engineer", [{"title": "Coding", "rating": 60, "feedback": "ok"}]),
            interview(3, "Jane Doe", "j.s@x.com", 2, "Data Analyst", [{"title": "SQL", "rating": 90}]),
            interview(4, "Max Pending", "max@example.com", 2, "Data Analyst", [], status="IN_PROGRESS", completedAt=None),
            interview(5, "Lee Ops", "lee@example.com", 3, "SRE", [{"title": "Ops", "rating": 100}]),
        ],
        "jobs": [{"id": 1, "title": "Backend Engineer"}, {"id": 2, "title": "Data Analyst"}, {"id": 3, "title": "SRE"}],
        "focus_areas": {"1": ["Coding", "Communication"], "2": ["SQL"]},
    }
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot), encoding="utf-8")
    return path


def test_cli_writes_report_with_projected_columns(tmp_path: Path, runner: CliRunner, snapshot_path: Path):
    output_path = tmp_path / "report.json"

    result = runner.invoke(
        app,
        [
            "--snapshot",
            str(snapshot_path),
            "--output",
            str(output_path),
            "--sort-key",
            "overall_rating",
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))

    assert rendered["columns"] == ["Coding", "Communication", "SQL"]
    assert [r["overall_rating"] for r in rendered["results"]] == [90, 35, 0]
    john = rendered["results"][1]
    assert john["area_scores"] == {"Coding": 70.0, "Communication": 0.0}
    assert john["focus_areas"]["Coding"]["total_responses"] == 2
    assert john["focus_areas"]["SQL"]["area_score"] is None
    assert rendered["metadata"]["partial"] is True
    assert rendered["metadata"]["failed_jobs"].keys() == {"3"}
    assert rendered["metadata"]["total_results"] == 3


def test_cli_applies_job_filter_and_search(tmp_path: Path, runner: CliRunner, snapshot_path: Path):
    output_path = tmp_path / "report.json"

    result = runner.invoke(
        app,
        [
            "--snapshot",
            str(snapshot_path),
            "--output",
            str(output_path),
            "--job",
            "1",
            "--search",
            "SMITH",
        ],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert [r["candidate_name"] for r in rendered["results"]] == ["John Smith"]
    assert rendered["columns"] == ["Coding", "Communication"]
    assert rendered["metadata"]["visible_results"] == 1


def test_cli_status_filter_other_than_completed_is_empty(tmp_path: Path, runner: CliRunner, snapshot_path: Path):
    output_path = tmp_path / "report.json"

    result = runner.invoke(
        app,
        ["--snapshot", str(snapshot_path), "--output", str(output_path), "--status", "in_progress"],
    )

    assert result.exit_code == 0, result.output
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["results"] == []
    assert rendered["columns"] == []


def test_cli_requires_a_source(tmp_path: Path, runner: CliRunner):
    result = runner.invoke(app, ["--output", str(tmp_path / "report.json")])

    assert result.exit_code != 0


def test_cli_rejects_unknown_sort_key(tmp_path: Path, runner: CliRunner, snapshot_path: Path):
    result = runner.invoke(
        app,
        ["--snapshot", str(snapshot_path), "--output", str(tmp_path / "r.json"), "--sort-key", "email"],
    )

    assert result.exit_code != 0


def test_cli_exits_with_code_2_on_fetch_failure(tmp_path: Path, runner: CliRunner):
    snapshot = tmp_path / "broken.json"
    snapshot.write_text("[1, 2]", encoding="utf-8")

    result = runner.invoke(
        app,
        ["--snapshot", str(snapshot), "--output", str(tmp_path / "report.json")],
    )

    assert result.exit_code == 2
    assert not (tmp_path / "report.json").exists()


def test_cli_reads_yaml_config(tmp_path: Path, runner: CliRunner, snapshot_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("refresh:\n  max_workers: 2\n", encoding="utf-8")
    output_path = tmp_path / "report.json"

    result = runner.invoke(
        app,
        ["--snapshot", str(snapshot_path), "--output", str(output_path), "--config", str(config_path)],
    )

    assert result.exit_code == 0, result.output
    assert output_path.exists()


def test_cli_accepts_console_log_format(tmp_path: Path, runner: CliRunner, snapshot_path: Path):
    output_path = tmp_path / "report.json"

    result = runner.invoke(
        app,
        ["--snapshot", str(snapshot_path), "--output", str(output_path), "--log-format", "console"],
    )

    assert result.exit_code == 0, result.output
    assert output_path.exists()


def test_cli_rejects_unknown_log_format(tmp_path: Path, runner: CliRunner, snapshot_path: Path):
    result = runner.invoke(
        app,
        ["--snapshot", str(snapshot_path), "--output", str(tmp_path / "r.json"), "--log-format", "xml"],
    )

    assert result.exit_code != 0
