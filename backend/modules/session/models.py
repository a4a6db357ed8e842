"""
Session module data models.

User is the identity record mirrored to client storage; SessionState is
the in-memory view handed to subscribers.
"""

from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    Identity record held by the session.

    Serialized with camelCase keys (emailId, blockchainId) so records
    written by the web client and by this package are interchangeable.
    """

    email_id: str = Field(..., alias="emailId", description="User's email address")
    blockchain_id: Optional[str] = Field(
        None, alias="blockchainId", description="Linked wallet address"
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "populate_by_name": True,
    }

    def to_storage(self) -> str:
        """Serialize for the persisted credential mirror."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class SessionState(BaseModel):
    """
    Snapshot of the authentication session.

    Note: is_signed_in=True with user=None is a reachable state; signing
    in without a user payload does not populate one.
    """

    is_signed_in: bool = Field(default=False)
    user: Optional[User] = Field(default=None)

    model_config = {"frozen": True}
