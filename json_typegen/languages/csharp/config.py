"""
C#-specific type mappings and serializer attribute styles.
"""

from enum import Enum

from ...core.formats import FormatTag


class CSharpStyle(Enum):
    """C# declaration styles."""

    CLASS = "class"
    RECORD = "record"


class CSharpAttributeStyle(Enum):
    """Serializer whose attribute carries the original JSON key."""

    SYSTEM_TEXT_JSON = "system_text_json"
    NEWTONSOFT = "newtonsoft"


# Attribute name and required using directive per serializer
CSHARP_ATTRIBUTES = {
    CSharpAttributeStyle.SYSTEM_TEXT_JSON: ("JsonPropertyName", "System.Text.Json.Serialization"),
    CSharpAttributeStyle.NEWTONSOFT: ("JsonProperty", "Newtonsoft.Json"),
}

# String formats with a richer .NET type
CSHARP_FORMAT_MAP = {
    FormatTag.DATE_TIME: "DateTime",
    FormatTag.UUID: "Guid",
}

COLLECTIONS_NAMESPACE = "System.Collections.Generic"
SYSTEM_NAMESPACE = "System"
