"""
Simulator API Routes

Endpoint running a paid-leave simulation for one contract.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from backend.config import Settings, get_settings
from backend.schemas.simulation import SimulationRequest
from engines.schemas.leave_engine import LeaveCalculationOutput
from engines.services.leave_calculator import calculate_leave
from engines.services.params_validator import validate_simulation_params

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/simulate",
    response_model=LeaveCalculationOutput,
    summary="Simulate paid leave",
    description=(
        "Split a contract into leave-accrual periods and return the monthly "
        "salary and leave payments under each disbursement policy."
    ),
)
async def simulate(
    request: SimulationRequest,
    settings: Settings = Depends(get_settings),
) -> LeaveCalculationOutput:
    """Validate the form values, then run the leave calculation."""
    input_data, failure = validate_simulation_params(
        request.model_dump(),
        salary_floor=settings.salary_floor,
        salary_ceiling=settings.salary_ceiling,
    )
    if failure is not None:
        logger.info(f"Simulation rejected: {failure.value}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=failure.message(settings.salary_floor, settings.salary_ceiling),
        )

    return calculate_leave(input_data)
