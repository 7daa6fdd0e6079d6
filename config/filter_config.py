"""
Run configuration for the field filter.
"""

from pydantic import BaseModel, ConfigDict, Field

class FilterConfig(BaseModel):
    """Validated settings for a single filter run."""

    model_config = ConfigDict(frozen=True)

    field: int = Field(..., ge=0, description="Zero-based index of the field to select")
    delimiter: str = Field(..., description="Literal delimiter to split the line on")
    color: str = Field(..., description="Color token: 'r', 'g', 'b' or 'y'")
    debug: bool = Field(False, description="Log pipeline stages to stderr")
