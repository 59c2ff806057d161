from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str


class KeyBetweenIn(BaseModel):
    low: Optional[str] = Field(default=None, min_length=1, max_length=1024)
    high: Optional[str] = Field(default=None, min_length=1, max_length=1024)
    jitterBits: Optional[int] = Field(default=None, ge=0, le=64)


class KeyOut(BaseModel):
    key: str


class KeyBatchIn(BaseModel):
    low: Optional[str] = Field(default=None, min_length=1, max_length=1024)
    high: Optional[str] = Field(default=None, min_length=1, max_length=1024)
    count: int = Field(ge=0)
    jitterBits: Optional[int] = Field(default=None, ge=0, le=64)


class KeysOut(BaseModel):
    keys: list[str]


class KeyValidateIn(BaseModel):
    key: str = Field(min_length=1, max_length=1024)


class KeyPartsOut(BaseModel):
    key: str
    integerPart: str
    fractionalPart: str
