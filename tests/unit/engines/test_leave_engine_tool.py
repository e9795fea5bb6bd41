"""
Leave Engine MCP Tool Tests
"""

import pytest

from engines.tools.leave_engine import calculate_paid_leave


class TestCalculatePaidLeaveTool:
    """Test the JSON-ready tool output."""

    @pytest.mark.asyncio
    async def test_valid_contract(self):
        result = await calculate_paid_leave("2024-04-15", "2024-07-10", "1000")

        assert [p["start_date"] for p in result["periods"]] == ["2024-04-15", "2024-06-01"]
        assert result["periods"][0]["value_due"] == "174.24"
        assert result["monthly_details"][0]["month"] == "2024-04-01"
        assert result["monthly_details"][0]["salary_due"] == "533.33"
        assert result["monthly_details"][-1]["leave_regularization"] == "-49.70"

    @pytest.mark.asyncio
    async def test_rejected_contract(self):
        result = await calculate_paid_leave("2024-04-15", "2024-03-01", "1000")

        assert result["code"] == "chronological_order"
        assert result["error"] == "The end date must be after the start date."
