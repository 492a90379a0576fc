"""
Kotlin-specific declaration and annotation styles.
"""

from enum import Enum


class KotlinStyle(Enum):
    """Kotlin declaration styles."""

    DATA_CLASS = "data_class"
    CLASS = "class"


class KotlinAnnotationStyle(Enum):
    """Serialization library whose annotation carries the original JSON key."""

    SERIALIZATION = "serialization"
    MOSHI = "moshi"
    GSON = "gson"


# Property annotation and its import, per library
KOTLIN_PROPERTY_ANNOTATIONS = {
    KotlinAnnotationStyle.SERIALIZATION: ("SerialName", "kotlinx.serialization.SerialName"),
    KotlinAnnotationStyle.MOSHI: ("Json", "com.squareup.moshi.Json"),
    KotlinAnnotationStyle.GSON: ("SerializedName", "com.google.gson.annotations.SerializedName"),
}

# Class-level annotations, per library
KOTLIN_CLASS_ANNOTATIONS = {
    KotlinAnnotationStyle.SERIALIZATION: ("Serializable", "kotlinx.serialization.Serializable"),
}
