# This project was developed with assistance from AI tools.
"""Structure generation route -- the single entry point for the demo flow."""

import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..core.config import get_policy
from ..schemas.applicant import ApplicantInput
from ..schemas.policy import Policy
from ..schemas.structure import StructureResponse
from ..services.discussion import produce_discussion_points
from ..services.structure import build_structure

router = APIRouter()


async def _read_json_object(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object. An empty body counts as ``{}``."""
    body = await request.body()
    if not body.strip():
        return {}
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be valid JSON.",
        ) from exc
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be a JSON object.",
        )
    return payload


@router.post(
    "/generate-structure",
    response_model=StructureResponse,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ApplicantInput.model_json_schema()}},
        }
    },
)
async def generate_structure(
    request: Request,
    policy: Policy = Depends(get_policy),
) -> StructureResponse:
    """Generate discussion points, run the Policy Gate and return the trace.

    Missing or non-numeric figures are treated as 0 and surface as gate
    reasons; they never fail the request.
    """
    payload = await _read_json_object(request)
    applicant = ApplicantInput.model_validate(payload)

    discussion = await produce_discussion_points(applicant)
    return build_structure(applicant, policy, discussion)
