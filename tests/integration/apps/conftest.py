from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

CONFIG_ROOT = Path(__file__).resolve().parents[3] / "config"


@pytest.fixture
def config_path():
    def _path(name: str) -> str:
        return str(CONFIG_ROOT / name)

    return _path


@pytest.fixture
def parse_printed_json():
    def _parse(text: str) -> dict[str, Any]:
        return json.loads(text)

    return _parse


@pytest.fixture
def run_help(capsys):
    def _run(mod, expected: str) -> None:
        with pytest.raises(SystemExit) as exc:
            mod.main(["--help"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert expected in out

    return _run
