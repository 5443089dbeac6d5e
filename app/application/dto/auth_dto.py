from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginFormResponse(BaseModel):
    """DTO describing the login form (where to go after signing in)"""
    model_config = ConfigDict(populate_by_name=True)

    redirect_to: str = Field(default="/", alias="redirectTo")


class LoginErrors(BaseModel):
    """Field-level login errors; at most one field is set per response"""
    username: Optional[str] = None
    password: Optional[str] = None
    form: Optional[str] = None


class LoginErrorResponse(BaseModel):
    """DTO for a rejected login attempt"""
    errors: LoginErrors
