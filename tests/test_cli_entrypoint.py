from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest

LAYOUT = {
    "islands": [{"id": "x", "center": [0, 0], "range": 50}],
    "greenhouses": [
        {"name": "A", "anchor": [0, 60, 0], "footprint": {"rect": [0, 0, 10, 10]}, "floor": 60, "ceiling": 80},
    ],
}


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("greenhouse_registry.main")

    assert hasattr(module, "app")
    assert module.app is not None


@pytest.fixture()
def layout_file(tmp_path: Path) -> str:
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(LAYOUT), encoding="utf-8")
    return str(path)


def test_probe_reports_containing_greenhouse(layout_file: str) -> None:
    testing = pytest.importorskip("typer.testing")
    from greenhouse_registry.main import app

    result = testing.CliRunner().invoke(
        app, ["probe", "--x", "5", "--y", "70", "--z", "5", "--layout-file", layout_file]
    )

    assert result.exit_code == 0
    assert "'in_greenhouse': True" in result.output
    assert "'above_greenhouse': False" in result.output


def test_delete_island_clears_greenhouses(layout_file: str) -> None:
    testing = pytest.importorskip("typer.testing")
    from greenhouse_registry.main import app

    runner = testing.CliRunner()
    deleted = runner.invoke(app, ["delete-island", "x", "--layout-file", layout_file])
    unknown = runner.invoke(app, ["delete-island", "nope", "--layout-file", layout_file])

    assert deleted.exit_code == 0
    assert "'remaining': []" in deleted.output
    assert unknown.exit_code == 1


def test_load_rejects_invalid_layout(tmp_path: Path) -> None:
    testing = pytest.importorskip("typer.testing")
    from greenhouse_registry.main import app

    path = tmp_path / "broken.json"
    path.write_text("not json", encoding="utf-8")

    result = testing.CliRunner().invoke(app, ["load", "--layout-file", str(path)])

    assert result.exit_code != 0
