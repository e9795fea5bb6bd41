"""
Simulation Pydantic Schemas

API request models for the paid-leave simulator.
"""

from pydantic import BaseModel, Field


class SimulationRequest(BaseModel):
    """
    Raw simulator form values.

    Kept as strings so that every rejection goes through the simulation
    params validator and comes back with its user-facing message.
    """

    start_date: str | None = Field(default=None, description="Contract start date (YYYY-MM-DD)")
    end_date: str | None = Field(default=None, description="Contract end date (YYYY-MM-DD)")
    monthly_salary: str | int | float | None = Field(
        default=None,
        description="Gross monthly salary",
    )
