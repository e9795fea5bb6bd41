"""
Tests for Environment Settings
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from backend.config import Settings


class TestSalaryBounds:
    """Test the simulator salary bounds."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.salary_floor == Decimal("200")
        assert settings.salary_ceiling == Decimal("1200")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SALARY_FLOOR", "300")
        monkeypatch.setenv("SALARY_CEILING", "1500.50")

        settings = Settings(_env_file=None)

        assert settings.salary_floor == Decimal("300")
        assert settings.salary_ceiling == Decimal("1500.50")

    def test_floor_above_ceiling_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, salary_floor=Decimal("1500"), salary_ceiling=Decimal("1200"))
