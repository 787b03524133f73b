"""Pydantic models for the headline statistics counters."""

from typing import Optional, Union

from .common import ContentModel


class StatCreate(ContentModel):
    label: str
    value: Union[int, str]
    suffix: str = "+"
    order: int


class StatUpdate(ContentModel):
    label: Optional[str] = None
    value: Optional[Union[int, str]] = None
    suffix: Optional[str] = None
    order: Optional[int] = None
