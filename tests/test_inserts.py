"""Tests for data insert script generation."""

from datetime import datetime

from schema_sqlgen.generation.dialects import ORACLE, POSTGRESQL, SQLSERVER
from schema_sqlgen.generation.inserts import InsertGenerator
from schema_sqlgen.schema import DatabaseColumn, DatabaseTable, classify


def test_sqlserver_identity_insert(categories, generator_config):
    generator = InsertGenerator(SQLSERVER, categories, generator_config, rows=[
        {"CategoryID": 1, "CategoryName": "Beverages", "Description": "Soft drinks, coffees, teas"},
    ])
    lines = generator.write().splitlines()

    assert lines[0] == "SET IDENTITY_INSERT [dbo].[Categories] ON;"
    assert lines[1] == (
        "INSERT INTO [dbo].[Categories] ([CategoryID], [CategoryName], [Description]) "
        "VALUES (1, 'Beverages', N'Soft drinks, coffees, teas');"
    )
    assert lines[2] == "SET IDENTITY_INSERT [dbo].[Categories] OFF;"


def test_rows_without_identity_values(categories, generator_config):
    generator = InsertGenerator(SQLSERVER, categories, generator_config)
    generator.add_row({"CategoryName": "Condiments", "Description": None})
    sql = generator.write()

    assert "IDENTITY_INSERT" not in sql
    assert "([CategoryName], [Description]) VALUES ('Condiments', NULL);" in sql


def test_escaping_and_unknown_keys(categories, generator_config):
    generator = InsertGenerator(SQLSERVER, categories, generator_config, rows=[
        {"CategoryName": "Chef's choice", "Unknown": 3},
    ])
    sql = generator.write()
    assert "VALUES ('Chef''s choice');" in sql
    assert "Unknown" not in sql


def test_oracle_dates(generator_config):
    table = DatabaseTable(name="Orders", schema_owner="SALES")
    table.add_column(DatabaseColumn(name="OrderID", data_type=classify("number", "decimal"), precision=10))
    table.add_column(DatabaseColumn(name="OrderDate", data_type=classify("datetime", "datetime")))
    generator = InsertGenerator(ORACLE, table, generator_config, rows=[
        {"OrderID": 10248, "OrderDate": datetime(1996, 7, 4)},
    ])
    sql = generator.write()

    assert 'INSERT INTO "SALES"."Orders" ("OrderID", "OrderDate")' in sql
    assert "TO_DATE('1996-07-04 00:00:00','YYYY-MM-DD HH24:MI:SS')" in sql


def test_postgresql_booleans(products, generator_config):
    generator = InsertGenerator(POSTGRESQL, products, generator_config, rows=[
        {"ProductName": "Chai", "Discontinued": False},
    ])
    assert "VALUES ('Chai', FALSE);" in generator.write()


def test_no_rows_renders_nothing(categories, generator_config):
    assert InsertGenerator(SQLSERVER, categories, generator_config).write() == ""
    assert InsertGenerator(SQLSERVER, categories, generator_config, rows=[{"Other": 1}]).write() == ""
