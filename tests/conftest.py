"""Shared fixtures: a small Northwind-style schema."""

import pytest

from schema_sqlgen.generation.config import GeneratorConfig
from schema_sqlgen.schema import (
    DatabaseColumn,
    DatabaseConstraint,
    DatabaseForeignKey,
    DatabaseSchema,
    DatabaseTable,
    classify,
)


def column(name, native, hint, **kwargs):
    return DatabaseColumn(name=name, data_type=classify(native, hint), **kwargs)


@pytest.fixture
def categories():
    table = DatabaseTable(name="Categories", schema_owner="dbo")
    table.add_column(column("CategoryID", "int", "int32", nullable=False, is_identity=True))
    table.add_column(column("CategoryName", "varchar", "string", length=15, nullable=False))
    table.add_column(column("Description", "ntext", "string"))
    table.primary_key = DatabaseConstraint(name=None, columns=["CategoryID"])
    return table


@pytest.fixture
def suppliers():
    table = DatabaseTable(name="Suppliers", schema_owner="dbo")
    table.add_column(column("SupplierID", "int", "int32", nullable=False, is_identity=True))
    table.add_column(column("CompanyName", "nvarchar", "string", length=40, nullable=False))
    table.primary_key = DatabaseConstraint(name="PK_Suppliers", columns=["SupplierID"])
    return table


@pytest.fixture
def products():
    table = DatabaseTable(name="Products", schema_owner="dbo")
    table.add_column(column("ProductID", "int", "int32", nullable=False, is_identity=True))
    table.add_column(column("ProductName", "nvarchar", "string", length=40, nullable=False))
    table.add_column(column("SupplierID", "int", "int32"))
    table.add_column(column("CategoryID", "int", "int32"))
    table.add_column(column("UnitPrice", "decimal", "decimal", precision=10, scale=2, default_value="0"))
    table.add_column(column("Discontinued", "bit", "bool", nullable=False, default_value="0"))
    table.primary_key = DatabaseConstraint(name=None, columns=["ProductID"])
    table.add_foreign_key(DatabaseForeignKey(
        name=None,
        table_name="Products",
        referenced_table="Suppliers",
        columns=["SupplierID"],
        referenced_columns=["SupplierID"],
    ))
    table.add_foreign_key(DatabaseForeignKey(
        name="FK_Products_Categories",
        table_name="Products",
        referenced_table="Categories",
        columns=["CategoryID"],
        referenced_columns=["CategoryID"],
    ))
    return table


@pytest.fixture
def order_details():
    table = DatabaseTable(name="Order Details", schema_owner="dbo")
    table.add_column(column("OrderID", "int", "int32", nullable=False))
    table.add_column(column("ProductID", "int", "int32", nullable=False))
    table.add_column(column("Quantity", "smallint", "int16", nullable=False))
    table.primary_key = DatabaseConstraint(name=None, columns=["OrderID", "ProductID"])
    # referenced columns resolved from the Products primary key
    table.add_foreign_key(DatabaseForeignKey(
        name=None,
        table_name="Order Details",
        referenced_table="Products",
        columns=["ProductID"],
    ))
    return table


@pytest.fixture
def northwind(categories, suppliers, products, order_details):
    """Tables declared in an order that violates their dependencies."""
    schema = DatabaseSchema(owner="dbo")
    for table in (products, categories, suppliers, order_details):
        schema.add_table(table)
    return schema


@pytest.fixture
def generator_config():
    return GeneratorConfig()
