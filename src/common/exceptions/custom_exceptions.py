"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class ValidationError(ApplicationError):
    """Exception raised when caller input violates an inventory rule. The document is left unchanged."""

    def __init__(self, message: str = "Invalid input", reason: str = "invalid_input") -> None:
        super().__init__(message)
        self.reason = reason


class InsufficientStockError(ValidationError):
    """Exception raised when a sale asks for more units than the product has in stock."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock: requested {requested}, available {available}", reason="insufficient_stock"
        )
        self.requested = requested
        self.available = available


class NotFoundError(ApplicationError):
    """Exception raised when a referenced entity does not exist in the document."""

    def __init__(self, message: str = "Entity not found", entity_id: str | None = None) -> None:
        super().__init__(message)
        self.entity_id = entity_id


class StorageCorruptError(ApplicationError):
    """Exception raised when the persisted blob cannot be decoded into a document."""

    def __init__(
        self, message: str = "Stored document is corrupt", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message, original_exception)
        self.message = f"Storage Error: {message}"


class DatabaseError(ApplicationError):
    """Exception raised for errors during database operations."""

    def __init__(self, message: str = "Database operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Database Error: {message}"
