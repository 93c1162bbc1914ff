"""Resource owner model for the authenticated reddit account."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class RedditUser(BaseModel):
    """Profile returned by ``/api/v1/me``.

    Only the identifying fields are required; everything else reddit sends
    is kept as extra data.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    created_utc: float | None = None
    link_karma: int | None = None
    comment_karma: int | None = None
    has_verified_email: bool | None = None
    is_gold: bool | None = None
    over_18: bool | None = None
    icon_img: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
