"""Error types for the tracker core."""


class WaterTrackError(Exception):
    """Base error for the tracker core."""


class InvalidInputError(WaterTrackError, ValueError):
    """Raised when a caller supplies a value the core cannot accept."""


class InvalidAmountError(InvalidInputError):
    """Raised for a non-positive intake or focus amount."""

    def __init__(self, amount: int) -> None:
        super().__init__(f"Amount must be positive, got {amount}")
        self.amount = amount


class InvalidTargetError(InvalidInputError):
    """Raised for a non-positive daily target."""

    def __init__(self, target: int) -> None:
        super().__init__(f"Target must be positive, got {target}")
        self.target = target


class IndexOutOfRangeError(InvalidInputError):
    """Raised when a deletion refers to a record that does not exist."""

    def __init__(self, indices: list[int], size: int) -> None:
        super().__init__(f"Record indices {indices} out of range for {size} records")
        self.indices = indices
        self.size = size


class DeserializationError(WaterTrackError):
    """Raised when persisted data is malformed or carries an unknown schema."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Cannot decode {key}: {reason}")
        self.key = key
        self.reason = reason
