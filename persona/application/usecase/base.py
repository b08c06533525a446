"""Shared response model for use cases."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Response model serialized with camelCase field names.

    ``wire()`` gives the JSON-ready mapping handed to the response formatter.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
