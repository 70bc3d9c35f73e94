from pydantic import BaseModel, Field
from typing import Literal


class ListingConfig(BaseModel):
    unix_style: bool = True


class PatternConfig(BaseModel):
    default: str = "**"


class GlobtreeConfig(BaseModel):
    listing: ListingConfig = Field(default_factory=ListingConfig)
    pattern: PatternConfig = Field(default_factory=PatternConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
