from typing import Type, TypeVar
from pydantic import BaseModel, ValidationError

from opti.exceptions import ConfigurationError
from opti.utils.logger import get_logger

logger = get_logger(__name__)

C = TypeVar('C', bound='BaseConfig')


class BaseConfig(BaseModel):
    """Base class for all opti configuration models."""

    class Config:
        extra = "forbid"  # Prevent extra fields


def build_config(config_cls: Type[C], **values) -> C:
    """
    Validate keyword arguments into a config model.

    Raises:
        ConfigurationError: If any of the values fail validation. The pydantic
            error is chained.
    """
    try:
        return config_cls(**values)
    except ValidationError as e:
        logger.error(f"{config_cls.__name__} validation error: {e}")
        raise ConfigurationError(f"Invalid {config_cls.__name__}: {e}") from e
