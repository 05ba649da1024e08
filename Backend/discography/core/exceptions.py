from typing import Any, Dict

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


class DiscographyError(Exception):
    """Base exception for the Discography API"""
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(DiscographyError):
    """Request body or parameters could not be parsed"""
    status_code = 422

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.message}


class NotFoundError(DiscographyError):
    """No live row matches the requested id"""
    status_code = 404

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(f"Cannot find {resource} with id {resource_id}")
        self.resource = resource
        self.resource_id = resource_id


class PersistenceError(DiscographyError):
    """The store rejected a write. The detail is logged, never returned."""
    status_code = 500

    def __init__(self, message: str, operation: str = "unknown"):
        super().__init__(message)
        self.operation = operation

    def to_response(self) -> Dict[str, Any]:
        return {"message": INTERNAL_ERROR_MESSAGE}
