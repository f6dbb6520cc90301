"""Fixture builders shared by the pipeline tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Iterable

from pipeline.frameworks import FRAMEWORKS

FAKE_BUILD = Path(__file__).resolve().parent / "fake_build.py"

SOURCE_CSS = """
.a { color: red; }
.b { background-color: blue; }
div { color: green; }
"""


def fake_build_command() -> tuple:
    return (sys.executable, str(FAKE_BUILD), "{config}", "{output}", "{css}")


def write_configs(config_dir: Path, configs: dict) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    for name, body in configs.items():
        (config_dir / name).write_text(body, encoding="utf-8")


def write_node_modules(node_modules: Path, names: Iterable[str]) -> None:
    """Install tiny stand-in stylesheets for the named frameworks."""
    wanted = set(names)
    for fw in FRAMEWORKS:
        if fw.name not in wanted:
            continue
        css = node_modules / fw.css
        css.parent.mkdir(parents=True, exist_ok=True)
        css.write_text(f".{fw.name} {{\n  color: red;\n}}\n" * 20, encoding="utf-8")
        minified = node_modules / fw.minified
        minified.parent.mkdir(parents=True, exist_ok=True)
        minified.write_text(f".{fw.name}{{color:red}}" * 20, encoding="utf-8")


def read_json(path: Path) -> Any:
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)
