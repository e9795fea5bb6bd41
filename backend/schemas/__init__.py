"""Pydantic API Schemas for LeaveRight."""

from backend.schemas.simulation import SimulationRequest

__all__ = ["SimulationRequest"]
