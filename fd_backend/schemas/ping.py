"""Pydantic schemas for the health-check and error payloads."""

from typing import List, Union

from pydantic import BaseModel

from fd_backend.schemas.deposit import FieldError


class PingResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    detail: Union[str, List[FieldError]]
