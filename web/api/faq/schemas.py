"""FAQ filter API request/response schemas."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.faq import ALL
from settings import AJAX_ACTION

DEFAULT_INSTANCE_ID = "faq-ajax"
_INSTANCE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


class FilterRequest(BaseModel):
    """Form fields posted by the widget script."""

    model_config = ConfigDict(populate_by_name=True)

    action: str = AJAX_ACTION
    nonce: str | None = None
    term: str = ALL
    instance_id: str = Field(default=DEFAULT_INSTANCE_ID, alias="instanceId")

    @field_validator("instance_id", mode="before")
    @classmethod
    def sanitize_instance_id(cls, value: object) -> str:
        cleaned = _INSTANCE_CHARS.sub("", str(value or ""))[:64]
        return cleaned or DEFAULT_INSTANCE_ID


class FilterData(BaseModel):
    """Markup for the results region."""

    html: str


class ErrorInfo(BaseModel):
    """Reason a request was refused."""

    code: str
    message: str


class FilterResponse(BaseModel):
    """Success envelope."""

    success: bool = True
    data: FilterData


class ErrorResponse(BaseModel):
    """Failure envelope - never carries markup."""

    success: bool = False
    data: ErrorInfo


class CategoryItem(BaseModel):
    """Dropdown option."""

    value: str
    label: str


class CategoriesResponse(BaseModel):
    """Options offered by the category selector."""

    items: list[CategoryItem]
