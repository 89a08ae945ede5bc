from datetime import datetime
from typing import List
from pydantic import BaseModel


class Violation(BaseModel):
    field: str
    message: str


class ErrorsOut(BaseModel):
    errors: List[Violation]


class ErrorOut(BaseModel):
    error: str


class HealthOut(BaseModel):
    ok: bool = True
    ts: datetime
