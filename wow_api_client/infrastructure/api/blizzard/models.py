"""
Blizzard API Models

Pydantic models for the few Community API payloads the client itself reads.
Everything else is returned as opaque JSON.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuctionFile(BaseModel):
    """Pointer to a signed auction house dump."""
    url: str
    last_modified: Optional[int] = Field(None, alias="lastModified")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AuctionMetadata(BaseModel):
    """Response of ``auction/data/{realm}``."""
    files: List[AuctionFile] = Field(..., min_length=1)

    model_config = ConfigDict(extra="ignore")

    @property
    def latest(self) -> AuctionFile:
        """The dump the service lists first."""
        return self.files[0]
