import subprocess
import sys

import pytest

from votingsystem.settings import resolve_log_level


@pytest.mark.parametrize(("name", "expected"), [
    ("INFO", "INFO"),
    ("debug", "DEBUG"),
    (" warning ", "WARNING"),
    ("LOUD", "INFO"),
    ("", "INFO"),
    (None, "INFO"),
])
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


def test_bad_log_level_does_not_break_import(monkeypatch):
    monkeypatch.setenv("VOTING_LOG_LEVEL", "LOUD")
    proc = subprocess.run(
        [sys.executable, "-c", "import votingsystem.main as m; print(m.LOG_LEVEL)"],
        capture_output=True,
        text=True,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "INFO"


def test_ledger_import_skips_dotenv():
    code = (
        "import sys, votingsystem.storage; "
        "print('dotenv' in sys.modules, 'votingsystem.settings' in sys.modules)"
    )
    proc = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "False False"
