"""
Leave Engine MCP Tool

Paid-leave accrual and payment schedules exposed as an MCP tool.
"""

from fastmcp import FastMCP

from engines.services.leave_calculator import calculate_leave
from engines.services.params_validator import validate_simulation_params

# Initialize MCP server (will be started from server.py)
mcp = FastMCP("LeaveRight Leave Engine")


async def calculate_paid_leave(
    start_date: str,
    end_date: str,
    monthly_salary: str,
) -> dict:
    """
    Calculate paid-leave accrual and payment schedules for a contract.

    The contract is split into June 1 - May 31 leave-years. Each period is
    valued as the higher of the salary-maintain method and the 10% method,
    and the result is scheduled month by month as a lump sum, in 1/12
    installments, and as 10% of each month's salary with regularization.

    Args:
        start_date: Contract start date (YYYY-MM-DD)
        end_date: Contract end date (YYYY-MM-DD), after start_date
        monthly_salary: Gross monthly salary, within the agreement bounds

    Returns:
        Dictionary with periods, monthly_details and totals (amounts as
        decimal strings), or error and code when the inputs are rejected

    Example:
        2024-04-15 to 2024-07-10 at 1000.00 gives two periods:
        - 2024-04-15 to 2024-05-31, paid as a lump sum in June 2024
        - 2024-06-01 to 2024-07-10, paid as a lump sum in July 2024
    """
    input_data, failure = validate_simulation_params(
        {
            "start_date": start_date,
            "end_date": end_date,
            "monthly_salary": monthly_salary,
        }
    )
    if failure is not None:
        return {"error": failure.message(), "code": failure.value}

    result = calculate_leave(input_data)

    # Decimals become strings, dates ISO strings
    return result.model_dump(mode="json")


mcp.tool(name="calculate_paid_leave")(calculate_paid_leave)
