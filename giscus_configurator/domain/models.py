from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field, ConfigDict, model_validator

from giscus_configurator.domain.options import MappingChoice, Theme

class Category(BaseModel):
    """A GitHub discussion category that new discussions can be created in."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="The GraphQL Node ID of the category")
    emoji: str = Field("", description="Emoji shortcode shown next to the category name")
    name: str = Field(..., description="Display name of the category")

class RepositoryLookup(BaseModel):
    """
    Result of a successful repository lookup.
    Categories keep the order GitHub returned them in.
    """
    model_config = ConfigDict(frozen=True)

    repository_id: str = Field(..., description="The GraphQL Node ID of the repository")
    categories: List[Category] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_category_ids(self) -> "RepositoryLookup":
        ids = [category.id for category in self.categories]
        if len(ids) != len(set(ids)):
            raise ValueError("Category ids must be unique within a repository.")
        return self


# Validation states. Exactly one is current at a time; see RepositoryValidator.

class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"

class Pending(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["pending"] = "pending"
    repository: str

class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    repository: str
    repository_id: str
    categories: List[Category] = Field(..., min_length=1)

class Error(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    repository: str
    reason: str = Field("", description="Log-only explanation; consumers only look at status")

ValidationResult = Annotated[Union[Idle, Pending, Success, Error], Field(discriminator="status")]


class ValidatorSnapshot(BaseModel):
    """The validator fields the composer reads."""
    model_config = ConfigDict(frozen=True)

    repository_id: str = ""
    category_id: str = ""
    categories: List[Category] = Field(default_factory=list)

class DirectConfig(BaseModel):
    """Options set straight from toggles, with no derivation."""
    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme.LIGHT
    reactions_enabled: bool = True

class EmbedConfiguration(BaseModel):
    """
    Derived configuration the embed snippet is rendered from.
    Empty strings mark fields that are not resolved yet.
    """
    model_config = ConfigDict(frozen=True)

    repository: str = ""
    repository_id: str = ""
    category_id: str = ""
    mapping: MappingChoice = MappingChoice.PATHNAME
    term: str = ""
    theme: Theme = Theme.LIGHT
    reactions_enabled: bool = True
