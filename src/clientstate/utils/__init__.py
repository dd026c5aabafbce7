from .types import JsonDict
from .validation import first_error_location, format_validation_error

__all__ = ["JsonDict", "first_error_location", "format_validation_error"]
