from __future__ import annotations

from typing import List, Optional, Union

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

_HTTP_URL: TypeAdapter[AnyHttpUrl] = TypeAdapter(AnyHttpUrl)


class CheckRequest(BaseModel):
    url: str = Field(..., min_length=1)

    @field_validator("url")
    @classmethod
    def _must_be_http_url(cls, value: str) -> str:
        value = value.strip()
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError as exc:
            raise ValueError("url must be an absolute http(s) URL") from exc
        # Keep the typed text; AnyHttpUrl would normalise it.
        return value


class RegionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    region: StrictStr
    status: StrictStr
    response_time: Optional[Union[StrictInt, StrictFloat]] = Field(
        default=None, alias="responseTime"
    )


ResultSet = List[RegionResult]

RESULT_SET_ADAPTER: TypeAdapter[ResultSet] = TypeAdapter(ResultSet)
