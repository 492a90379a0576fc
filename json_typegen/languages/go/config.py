"""
Go-specific type mappings.
"""

from enum import Enum

from ...core.formats import FormatTag


class GoTagStyle(Enum):
    """How struct tags carry the original JSON key."""

    JSON = "json"
    JSON_OMITEMPTY = "json_omitempty"


# Rendered Go types for scalar nodes
GO_BOOL = "bool"
GO_INT32 = "int"
GO_INT64 = "int64"
GO_FLOAT = "float64"
GO_STRING = "string"

# Empty interface keeps generated code valid before Go 1.18
GO_UNKNOWN = "interface{}"

# String formats with a richer Go type: format -> (type, import path)
GO_FORMAT_MAP = {
    FormatTag.DATE_TIME: ("time.Time", "time"),
}
