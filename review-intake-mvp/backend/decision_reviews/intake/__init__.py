from .errors import ERROR_FOR_UNKNOWN_CODE, ERRORS_BY_CODE, error_from_error_code
from .factory import get_issue_validator
from .processor import HigherLevelReviewProcessor

__all__ = [
    "ERRORS_BY_CODE",
    "ERROR_FOR_UNKNOWN_CODE",
    "HigherLevelReviewProcessor",
    "error_from_error_code",
    "get_issue_validator",
]
