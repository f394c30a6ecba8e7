"""Settings consumed by the product facade.

Defaults live in code; a YAML file (see config/product.yaml) can override
them under its `product` key.
"""

from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from onixkit.utils.config_loader import ConfigLoader

DEFAULT_VERSION_THRESHOLD = "3.0"


class CardinalityRule(BaseModel):
    """Occurrence bounds for one direct child of <Product>. 0 means unbounded."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    min: int = Field(0, ge=0, description="Minimum occurrences (0 = no minimum)")
    max: int = Field(0, ge=0, description="Maximum occurrences (0 = unlimited)")


def _default_cardinality() -> Dict[str, CardinalityRule]:
    return {'ProductIdentifier': CardinalityRule(min=1)}


class ProductSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    cardinality: Dict[str, CardinalityRule] = Field(
        default_factory=_default_cardinality,
        description="Element name -> occurrence bounds, checked at construction",
    )
    version_threshold: str = Field(
        DEFAULT_VERSION_THRESHOLD,
        description="Versions at or above this use the ONIX 3.0 layout",
    )
    log_level: str = Field("INFO", description="Level for the 'product' logger")


DEFAULT_SETTINGS = ProductSettings()


def load_settings(path: Optional[str | Path] = None) -> ProductSettings:
    """Load ProductSettings from `path`, from $ONIXKIT_CONFIG, or the defaults.

    Raises:
        FileNotFoundError: if the given file does not exist
        pydantic.ValidationError: if the `product` section is malformed
    """
    loader = ConfigLoader(path) if path else ConfigLoader.from_env()
    if loader is None:
        return DEFAULT_SETTINGS
    return ProductSettings.model_validate(loader.section('product'))
