from pydantic import BaseModel, ConfigDict, constr
from pydantic.alias_generators import to_camel

RequiredStr = constr(strip_whitespace=True, min_length=1)


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str
