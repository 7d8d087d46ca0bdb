# This project was developed with assistance from AI tools.
"""Public API routes -- no authentication required."""

from fastapi import APIRouter, Depends

from ..core.config import get_policy
from ..schemas.policy import Policy

router = APIRouter()


@router.get("/policy", response_model=Policy)
async def read_policy(policy: Policy = Depends(get_policy)) -> Policy:
    """Return the thresholds the Policy Gate currently applies."""
    return policy
