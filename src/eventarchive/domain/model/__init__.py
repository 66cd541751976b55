"""Catalog domain model: entity kinds, associations and field mappings."""

from __future__ import annotations

from .enums import AssociationKind, EntityKind
from .fields import (
    FIELD_MAPPINGS,
    PARENT_ID_COLUMN,
    SOURCE_ID_COLUMN,
    SOURCE_ID_FIELD,
    FieldMapping,
    FieldSpec,
    FieldValue,
    RawRecord,
    mapping_for,
    record_value,
    split_list,
    trim_to_null,
)

__all__ = [
    "FIELD_MAPPINGS",
    "PARENT_ID_COLUMN",
    "SOURCE_ID_COLUMN",
    "SOURCE_ID_FIELD",
    "AssociationKind",
    "EntityKind",
    "FieldMapping",
    "FieldSpec",
    "FieldValue",
    "RawRecord",
    "mapping_for",
    "record_value",
    "split_list",
    "trim_to_null",
]
