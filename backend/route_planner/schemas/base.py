from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields with camelCase keys, as the map client expects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
