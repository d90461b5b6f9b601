from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from receipt_fields import settings as settings_module  # noqa: E402

SETTINGS_ENV = ["OCR_ENGINE", "OCR_LANGUAGE", "DATE_ORDER", "MAX_UPLOAD_BYTES", "APP_ENV"]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for name in SETTINGS_ENV:
        # setenv first so values loaded from a .env file are removed on undo
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    settings_module.reset_settings_state()
    yield monkeypatch
    settings_module.reset_settings_state()


@pytest.fixture
def sample_receipt() -> str:
    return "\n".join(
        [
            "FRESH FARM MARKET",
            "12 Main Street",
            "03/14/2024 10:42",
            "Milk 2L            3.49",
            "Bread              2.10",
            "Cheese             6.41",
            "Subtotal:         12.00",
            "Tax                0.50",
            "TOTAL:            12.50",
            "Thank you for shopping!",
        ]
    )
