from __future__ import annotations

class NominalMLError(Exception):
    """Base exception for nominal_ml."""
    pass

class ConfigurationError(NominalMLError):
    """Raised when a classifier configuration is invalid."""
    pass

class ModelNotFoundError(NominalMLError):
    """Raised when a model name is not registered."""
    pass

class DataError(NominalMLError):
    """Raised when a dataset or row is malformed."""
    pass

class UnseenValueError(DataError):
    """Raised when a row carries a value index the trained model has no slot for."""

    def __init__(self, attribute: str, value: int, num_values: int) -> None:
        self.attribute = attribute
        self.value = value
        self.num_values = num_values
        super().__init__(
            f"Unseen categorical value {value} for attribute '{attribute}' "
            f"(trained with {num_values} values)."
        )

class NotFittedError(NominalMLError):
    """Raised when a classifier is queried before it has been trained."""
    pass
