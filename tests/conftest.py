"""Test setup for legaloutline."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def no_token_estimate(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tiktoken from downloading encodings during tests."""
    monkeypatch.setattr("legaloutline.output_formatter.tiktoken", None)


@pytest.fixture
def sample_analysis() -> str:
    """Analysis text shaped like the analysis service output."""
    return (
        "Here is the analysis you asked for.\n"
        "\n"
        "# Executive Summary\n"
        "This lease is **one-sided** in favour of the landlord.\n"
        "\n"
        "## Key Terms\n"
        "* **Rent:** $2,000 per month\n"
        "- Deposit: two months\n"
        "## Risk Assessment\n"
        "- Automatic renewal is HIGH RISK.\n"
        "- Late fee schedule is medium risk.\n"
        "### Detail\n"
        "Notice period is low risk.\n"
        "# Hidden Clauses\n"
        "• Tenant pays all repairs.\n"
    )
