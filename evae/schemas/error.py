# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details error body returned by every failing route."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details (https://datatracker.ietf.org/doc/html/rfc7807)."""

    type: str = Field(default="about:blank", description="Problem type URI.")
    title: str = Field(description="Short summary, derived from the status code.")
    status: int = Field(description="HTTP status code.")
    detail: str = Field(default="", description="What went wrong with this request.")
    request_id: str = Field(
        default="",
        description="Correlation ID (x-request-id header, or generated) for log lookup.",
    )
    instance: str = Field(default="", description="Request path that produced the problem.")
