"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention. The string value
doubles as the last path segment of the RFC 7807 ``type`` URI.

Categories:
- Request format errors (INVALID_*, *_REQUIRED)
- Resource errors (*_NOT_FOUND)
- Unexpected faults (INTERNAL_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Request format errors
    INVALID_PATH_PARAMETER = "invalid_path_parameter"
    INVALID_JSON = "invalid_json"
    INVALID_BODY = "invalid_body"
    FIELD_REQUIRED = "field_required"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    ITEM_NOT_FOUND = "item_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Unexpected faults
    INTERNAL_ERROR = "internal_error"
