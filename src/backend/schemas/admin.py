"""
Authority and registrar management schemas.
"""

from pydantic import BaseModel, Field


class RegistrarCreate(BaseModel):
    principal: str = Field(..., max_length=256)


class RegistrarList(BaseModel):
    authority: str
    registrars: list[str]


class AuthorityTransfer(BaseModel):
    new_authority: str = Field(..., max_length=256)


class AuthorityResponse(BaseModel):
    authority: str
    previous_authority: str | None = None
