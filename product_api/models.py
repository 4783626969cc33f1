# product_api/models.py
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(alias="inStock")

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# Request bodies.  Strict: no coercion, so "10" is not a price and 1 is
# not a boolean.  Fields are declared in the order errors are reported.
class ProductCreate(BaseModel):
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    name: StrictStr
    description: StrictStr
    price: Union[StrictInt, StrictFloat]
    category: StrictStr
    in_stock: StrictBool = Field(alias="inStock")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class ProductUpdate(BaseModel):
    """Partial update.  Absent fields stay unset; an explicit null still fails."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    name: StrictStr = None
    description: StrictStr = None
    price: Union[StrictInt, StrictFloat] = None
    category: StrictStr = None
    in_stock: StrictBool = Field(default=None, alias="inStock")

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
