"""Tests for dialect registration and the generator factory."""

import dataclasses

import pytest

from schema_sqlgen.exceptions import UnsupportedDialectError
from schema_sqlgen.generation.config import GeneratorConfig, SqlType
from schema_sqlgen.generation.dialects import ORACLE, SQLSERVER
from schema_sqlgen.generation.inserts import InsertGenerator
from schema_sqlgen.generation.procedures import ProcedureGenerator
from schema_sqlgen.generation.registry import (
    DdlGeneratorFactory,
    DialectRegistry,
    get_dialect_profile,
    list_available_dialects,
    register_dialect,
)
from schema_sqlgen.generation.tables import AllTablesGenerator, TableGenerator


def test_builtin_dialects():
    assert set(list_available_dialects()) >= {"sqlserver", "oracle", "mysql", "sqlite", "postgresql"}


@pytest.mark.parametrize("selector", [SqlType.ORACLE, "oracle", "Oracle", " ORACLE "])
def test_lookup_by_enum_or_name(selector):
    assert get_dialect_profile(selector) is ORACLE


def test_unknown_dialect():
    with pytest.raises(UnsupportedDialectError):
        get_dialect_profile("db2")
    with pytest.raises(UnsupportedDialectError):
        DdlGeneratorFactory("db2")


def test_registry_is_singleton():
    assert DialectRegistry() is DialectRegistry()


def test_register_custom_dialect():
    sybase = dataclasses.replace(SQLSERVER, sql_type="sybase", display_name="Sybase")
    register_dialect(sybase)
    try:
        assert get_dialect_profile("Sybase") is sybase
        with pytest.raises(ValueError):
            register_dialect(sybase)
        register_dialect(sybase, override=True)

        factory = DdlGeneratorFactory("sybase", GeneratorConfig())
        assert factory.profile is sybase
        assert repr(factory) == "DdlGeneratorFactory(sybase)"
    finally:
        DialectRegistry().unregister("sybase")
    assert "sybase" not in list_available_dialects()


def test_register_rejects_non_profiles():
    with pytest.raises(TypeError):
        register_dialect("not a profile")


def test_dialect_info():
    info = DialectRegistry().get_dialect_info(SqlType.ORACLE)
    assert info["display_name"] == "Oracle"
    assert info["uses_packages"] is True
    assert "VARCHAR2" in info["types"]


def test_factory_builds_bound_generators(categories, northwind):
    config = GeneratorConfig(manual_prefix="x_")
    factory = DdlGeneratorFactory(SqlType.SQLSERVER, config)

    table = factory.table_generator(categories)
    schema = factory.all_tables_generator(northwind)
    procedures = factory.procedure_generator(categories)
    inserts = factory.insert_generator(categories, rows=[{"CategoryName": "Seafood"}])

    assert isinstance(table, TableGenerator)
    assert isinstance(schema, AllTablesGenerator)
    assert isinstance(procedures, ProcedureGenerator)
    assert isinstance(inserts, InsertGenerator)
    assert all(g.profile is SQLSERVER for g in (table, schema, procedures, inserts))
    assert procedures.manual_prefix == "x_"


def test_generators_are_independent(categories):
    factory = DdlGeneratorFactory("sqlserver", GeneratorConfig())
    first = factory.table_generator(categories)
    second = factory.table_generator(categories)
    first.include_schema = False
    assert second.include_schema is True


def test_sqlite_procedures_unsupported(categories):
    factory = DdlGeneratorFactory(SqlType.SQLITE, GeneratorConfig())
    with pytest.raises(UnsupportedDialectError):
        factory.procedure_generator(categories)
