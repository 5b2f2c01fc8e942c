from .analysis import (
    Analyzer,
    EnglishAnalyzer,
    KeywordAnalyzer,
    SimpleAnalyzer,
    StandardAnalyzer,
    WhitespaceAnalyzer,
    analyze_term,
    build_default_analyzers,
)
from .compilers import (
    CompilerRegistry,
    ConditionCompiler,
    FuzzyCompiler,
    PhraseCompiler,
    RegexpCompiler,
    build_default_registry,
)
from .conditions import Condition, FuzzyCondition, PhraseCondition, RegexpCondition
from .exceptions import (
    AnalysisError,
    ConditionError,
    ConditionParseError,
    MissingFieldError,
    MissingValueError,
    OutOfRangeParameterError,
    SchemaError,
    UnsupportedFieldTypeError,
    ValidationError,
)
from .factory import AnyCondition, ConditionFactory
from .field_types import ConditionType, FieldType
from .ports import FieldTypeResolver, TextAnalyzer
from .query import (
    MAXIMUM_SUPPORTED_DISTANCE,
    FuzzyQuery,
    PhraseQuery,
    PhraseTerm,
    Query,
    RegexpQuery,
    Term,
)
from .schema import FieldMapping, Schema

__all__ = [
    # Conditions
    "Condition",
    "FuzzyCondition",
    "RegexpCondition",
    "PhraseCondition",
    "AnyCondition",
    "ConditionFactory",
    "ConditionType",
    # Compilers
    "ConditionCompiler",
    "CompilerRegistry",
    "FuzzyCompiler",
    "RegexpCompiler",
    "PhraseCompiler",
    "build_default_registry",
    # Queries
    "Query",
    "Term",
    "FuzzyQuery",
    "RegexpQuery",
    "PhraseQuery",
    "PhraseTerm",
    "MAXIMUM_SUPPORTED_DISTANCE",
    # Schema / analysis
    "FieldType",
    "FieldMapping",
    "Schema",
    "FieldTypeResolver",
    "TextAnalyzer",
    "Analyzer",
    "StandardAnalyzer",
    "EnglishAnalyzer",
    "SimpleAnalyzer",
    "WhitespaceAnalyzer",
    "KeywordAnalyzer",
    "analyze_term",
    "build_default_analyzers",
    # Exceptions
    "ConditionError",
    "ValidationError",
    "MissingFieldError",
    "MissingValueError",
    "OutOfRangeParameterError",
    "ConditionParseError",
    "UnsupportedFieldTypeError",
    "AnalysisError",
    "SchemaError",
]
