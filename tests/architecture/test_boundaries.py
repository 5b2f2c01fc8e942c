from pytest_archon import archrule


def test_query_model_independence() -> None:
    """
    The engine query model is the lowest level.
    It must not know about conditions, compilers or schemas.
    """
    (
        archrule("query_is_independent")
        .match("search_conditions.query")
        .should_not_import("search_conditions.conditions")
        .should_not_import("search_conditions.compilers*")
        .should_not_import("search_conditions.schema")
        .should_not_import("search_conditions.factory")
        .check("search_conditions")
    )


def test_compilers_use_injected_collaborators() -> None:
    """
    Compilers receive the field type resolver and analyzer as arguments.
    They must not reach for a concrete schema, analyzer or the factory.
    """
    (
        archrule("compilers_are_schema_agnostic")
        .match("search_conditions.compilers*")
        .should_not_import("search_conditions.schema")
        .should_not_import("search_conditions.analysis")
        .should_not_import("search_conditions.factory")
        .check("search_conditions")
    )


def test_schema_layering() -> None:
    """
    The schema provides collaborators; it does not depend on the
    conditions compiled against it.
    """
    (
        archrule("schema_layering")
        .match("search_conditions.schema")
        .should_not_import("search_conditions.conditions")
        .should_not_import("search_conditions.compilers*")
        .should_not_import("search_conditions.factory")
        .check("search_conditions")
    )


def test_analysis_isolation() -> None:
    """Analyzers are plain text processing with no knowledge of schemas."""
    (
        archrule("analysis_isolation")
        .match("search_conditions.analysis")
        .should_not_import("search_conditions.schema")
        .should_not_import("search_conditions.conditions")
        .should_not_import("search_conditions.compilers*")
        .should_not_import("search_conditions.query")
        .check("search_conditions")
    )
