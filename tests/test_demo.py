import runpy
import sys
from pathlib import Path

import pytest
from loguru import logger

DEMO = Path(__file__).resolve().parent.parent / "scripts" / "demo.py"


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.__stderr__)


def test_demo_report(monkeypatch, capsys, restore_logger):
    monkeypatch.setattr(sys, "argv", ["demo.py"])

    runpy.run_path(str(DEMO), run_name="__main__")

    out, err = capsys.readouterr()
    assert "Category Distribution:" in out
    assert "   tops: 3 items (38%)" in out
    assert "Average Price Point: $135.00" in out
    assert "| DEBUG" not in err
