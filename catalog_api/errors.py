"""Error hierarchy for the catalogue API.

Every domain failure is a ``CatalogError`` carrying a machine code and
the HTTP status it maps to. ``to_response()`` produces the same
``{success, message}`` envelope the routes use for successful calls, so
clients only ever parse one shape. Anything that is not a
``CatalogError`` is an internal fault and is handled by the catch-all
in ``error_handlers``.
"""

from typing import Optional


class CatalogError(Exception):
    """Base exception for all catalogue errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"success": False, "message": self.message}


class ValidationError(CatalogError):
    """A required field is missing or empty."""

    def __init__(self, message: str = "Please provide name, slug, and image",
                 fields: Optional[list] = None):
        super().__init__(message, "VALIDATION_ERROR", 400)
        self.fields = fields or []


class ConflictError(CatalogError):
    """The slug is already held by another category."""

    def __init__(self, slug: str, message: str = "Slug already exists"):
        super().__init__(message, "SLUG_CONFLICT", 400)
        self.slug = slug


class NotFoundError(CatalogError):
    """No category matches the requested id or slug."""

    def __init__(self, lookup: str, message: str = "Category not found"):
        super().__init__(message, "CATEGORY_NOT_FOUND", 404)
        self.lookup = lookup
