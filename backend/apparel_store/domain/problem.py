"""
Problem Details for HTTP APIs (RFC 9457)
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """Error body returned for every handled failure"""

    type: str = Field(..., description="URI identifying the problem type")
    title: str = Field(..., description="Short summary of the problem type")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Explanation of this occurrence")
    instance: Optional[str] = Field(None, description="Request path of this occurrence")
    extensions: Optional[Dict[str, Any]] = Field(None, description="Per-field violation messages")

    def to_dict(self) -> dict:
        """Serialize, leaving out empty members"""
        return self.model_dump(exclude_none=True)
