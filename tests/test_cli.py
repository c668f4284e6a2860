"""Tests for CLI functionality."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
import yaml

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def populated(project_dir, user_dir, make_file):
    """Project and user roots with a few resources."""
    make_file(project_dir / "templates" / "ieee.latex")
    make_file(user_dir / "templates" / "ieee.latex")
    make_file(user_dir / "templates" / "acm" / "template.latex")
    make_file(user_dir / "presets" / "organizations" / "acme.yaml")
    make_file(user_dir / "csl" / "apa.csl")


def run_cli(*args, cwd=None, env_extra=None):
    """Run the CLI and return the result."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    env.update(env_extra or {})
    cmd = [sys.executable, "-m", "pandoc_resources"] + list(args)
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        cwd=cwd,
        env=env,
    )


class TestCLI:
    """Test CLI commands."""

    def test_no_command_prints_help(self):
        result = run_cli()

        assert result.returncode == 1
        assert "usage:" in result.stdout

    def test_paths(self, project_root, user_dir):
        result = run_cli("paths", "--project-root", str(project_root), "--user-dir", str(user_dir))

        assert result.returncode == 0
        assert str(project_root / ".opencode" / "pandoc") in result.stdout
        assert str(user_dir) in result.stdout

    def test_paths_from_environment(self, project_root, tmp_path):
        """Without flags the working directory and XDG_CONFIG_HOME are used."""
        result = run_cli(
            "paths",
            cwd=project_root,
            env_extra={"XDG_CONFIG_HOME": str(tmp_path / "xdg")},
        )

        assert result.returncode == 0
        assert str(tmp_path / "xdg" / "opencode" / "pandoc") in result.stdout

    def test_resolve_found(self, populated, project_root, project_dir, user_dir):
        result = run_cli(
            "resolve", "template", "ieee",
            "--project-root", str(project_root), "--user-dir", str(user_dir),
        )

        assert result.returncode == 0
        assert result.stdout.strip() == f"{project_dir / 'templates' / 'ieee.latex'}\tproject"

    def test_resolve_directory_template(self, populated, project_root, user_dir):
        result = run_cli(
            "resolve", "template", "acm",
            "--project-root", str(project_root), "--user-dir", str(user_dir),
        )

        assert result.returncode == 0
        assert result.stdout.strip().endswith("template.latex\tuser")

    def test_resolve_missing(self, populated, project_root, user_dir):
        result = run_cli(
            "resolve", "csl", "chicago", "--show-candidates",
            "--project-root", str(project_root), "--user-dir", str(user_dir),
        )

        assert result.returncode == 1
        assert "Not found" in result.stderr
        assert "chicago.csl" in result.stderr

    def test_show_candidates_marks_directories_as_misses(self, project_root, project_dir, user_dir, make_file):
        """A template directory without its canonical file is not marked as a hit."""
        (project_dir / "templates" / "acm").mkdir(parents=True)
        make_file(user_dir / "templates" / "acm" / "template.latex")

        result = run_cli(
            "resolve", "template", "acm", "--show-candidates",
            "--project-root", str(project_root), "--user-dir", str(user_dir),
            env_extra={"PYTHONIOENCODING": "utf-8"},
        )

        assert result.returncode == 0
        lines = result.stderr.splitlines()
        assert f"  ✗ {project_dir / 'templates' / 'acm'}" in lines
        assert f"  ✓ {user_dir / 'templates' / 'acm' / 'template.latex'}" in lines
        assert result.stdout.strip().endswith("template.latex\tuser")

    def test_list_text(self, populated, project_root, user_dir):
        result = run_cli(
            "list", "template",
            "--project-root", str(project_root), "--user-dir", str(user_dir),
        )

        assert result.returncode == 0
        assert "Found 2 template resource(s)" in result.stdout
        assert "Source: project" in result.stdout

    def test_list_json(self, populated, project_root, user_dir):
        result = run_cli(
            "list", "template", "--format", "json",
            "--project-root", str(project_root), "--user-dir", str(user_dir),
        )

        assert result.returncode == 0
        entries = json.loads(result.stdout)
        assert [(e["name"], e["source"]) for e in entries] == [
            ("ieee", "project"),
            ("acm", "user"),
        ]

    def test_list_yaml(self, populated, project_root, user_dir):
        result = run_cli(
            "list", "preset", "--format", "yaml",
            "--project-root", str(project_root), "--user-dir", str(user_dir),
        )

        assert result.returncode == 0
        assert yaml.safe_load(result.stdout)[0]["name"] == "acme"

    def test_list_empty(self, project_root, user_dir):
        result = run_cli(
            "list", "csl",
            "--project-root", str(project_root), "--user-dir", str(user_dir),
        )

        assert result.returncode == 0
        assert "No csl resources found." in result.stdout

    def test_list_rejects_assets(self):
        result = run_cli("list", "asset")

        assert result.returncode == 2

    def test_init_is_idempotent(self, project_root, user_dir):
        args = ("init", "--project-root", str(project_root), "--user-dir", str(user_dir))

        first = run_cli(*args)
        second = run_cli(*args)

        assert first.returncode == 0
        assert second.returncode == 0
        assert (user_dir / "presets" / "organizations").is_dir()
        assert "templates/lncs/" in second.stdout

    def test_audit_log(self, populated, project_root, user_dir, tmp_path):
        log_path = tmp_path / "audit.jsonl"

        run_cli(
            "resolve", "csl", "apa", "--audit-log", str(log_path),
            "--project-root", str(project_root), "--user-dir", str(user_dir),
        )

        events = [json.loads(line) for line in log_path.read_text().splitlines()]
        assert events[0]["kind"] == "resolve"
        assert events[0]["source"] == "user"
