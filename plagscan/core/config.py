"""Configuration module for plagscan."""

import os
from pydantic import BaseModel, Field, ConfigDict, model_validator
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config(BaseModel):
    """Configuration for the text overlap engine."""

    # Matching settings
    min_size: int = Field(
        default_factory=lambda: os.getenv("PLAGSCAN_MIN_SIZE", "10"),
        validate_default=True,
        gt=0,
        description="Minimum length of a shared substring in characters"
    )
    phrase_length: int = Field(
        default_factory=lambda: os.getenv("PLAGSCAN_PHRASE_LENGTH", "3"),
        validate_default=True,
        gt=0,
        description="Number of words in a phrase"
    )

    # Rolling hash parameters, shared by both texts of a comparison
    hash_base: int = Field(
        default=256,
        ge=2,
        description="Polynomial base of the rolling hash"
    )
    hash_modulus: int = Field(
        default=1_000_000_007,
        ge=2,
        description="Prime modulus of the rolling hash"
    )

    # Labelling thresholds (exclusive lower bounds, in percent)
    high_threshold: float = Field(
        default=70.0,
        ge=0.0,
        le=100.0,
        description="Similarity above which the level is HIGH"
    )
    moderate_threshold: float = Field(
        default=40.0,
        ge=0.0,
        le=100.0,
        description="Similarity above which the level is MODERATE"
    )
    low_threshold: float = Field(
        default=15.0,
        ge=0.0,
        le=100.0,
        description="Similarity above which the level is LOW"
    )

    @model_validator(mode="after")
    def check_threshold_order(self) -> "Config":
        """Thresholds must not cross each other."""
        if not self.low_threshold <= self.moderate_threshold <= self.high_threshold:
            raise ValueError("thresholds must satisfy low <= moderate <= high")
        return self

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid"
    )
