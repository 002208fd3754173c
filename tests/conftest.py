from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest
from rdkit import RDLogger

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

RDLogger.DisableLog("rdApp.error")


@pytest.fixture
def write_smi(tmp_path):
    def _write(lines, name="mols.smi"):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def load_script():
    def _load(name):
        path = ROOT / "scripts" / f"{name}.py"
        spec = importlib.util.spec_from_file_location(f"scripts_{name}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
