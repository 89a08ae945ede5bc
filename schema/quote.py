from pydantic import BaseModel, ConfigDict, Field
from util.enum import ShippingMode


class QuoteIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    weight: float = Field(..., gt=0, allow_inf_nan=False)
    mode: ShippingMode


class QuoteOut(BaseModel):
    ok: bool = True
    estimate: int
    currency: str
