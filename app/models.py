from pydantic import BaseModel, ConfigDict, Field

# Field aliases are the wire labels of the document returned by
# pokedex.getpokemon(); they are reproduced exactly in API responses.
# Integers are strict: "45" or 45.0 in the stored document is a decode error.


class BaseStats(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hp: int = Field(alias="HP", strict=True)
    speed: int = Field(alias="Speed", strict=True)
    attack: int = Field(alias="Attack", strict=True)
    defense: int = Field(alias="Defense", strict=True)
    special_attack: int = Field(alias="Special Attack", strict=True)
    special_defense: int = Field(alias="Special Defense", strict=True)


# Localized Pokemon record (Public Endpoint)
class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="ID", gt=0, strict=True)
    name: str = Field(alias="Name")
    types: list[str] = Field(alias="Type", min_length=1)
    base_stats: BaseStats = Field(alias="Base Stats")
    generation: int = Field(alias="Generation", strict=True)


# Body of every 4xx/5xx response
class ErrorResponse(BaseModel):
    error: str
