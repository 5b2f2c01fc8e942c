from enum import Enum


class FieldType(str, Enum):
    """Declared data kinds of an index field."""

    # Character sequences
    STRING = "string"
    TEXT = "text"

    # Numeric
    INTEGER = "integer"
    BIGINT = "bigint"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"

    # Other scalars
    BOOLEAN = "boolean"
    DATE = "date"
    UUID = "uuid"
    TIMEUUID = "timeuuid"

    # Containers
    OBJECT = "object"
    MAP = "map"

    @property
    def is_char_seq(self) -> bool:
        """True if values of this type can be matched character by character."""
        return self in _CHAR_SEQ_TYPES

    def __str__(self) -> str:
        return self.value


_CHAR_SEQ_TYPES: frozenset[FieldType] = frozenset({FieldType.STRING, FieldType.TEXT})


class ConditionType(str, Enum):
    """Tags identifying each condition variant on the wire."""

    FUZZY = "fuzzy"
    REGEXP = "regexp"
    PHRASE = "phrase"

    def __str__(self) -> str:
        return self.value
