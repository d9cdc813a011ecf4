"""Tests for semantic data type classification and integer width resolution."""

import pytest

from schema_sqlgen.schema import DataType, classify, normalize_portable_hint, resolve_numeric_width


@pytest.fixture
def decimal_type():
    return classify("decimal", "decimal")


@pytest.mark.parametrize("precision,expected", [
    (0, "decimal"),
    (1, "decimal"),
    (2, "short"),
    (4, "short"),
    (5, "int"),
    (10, "int"),
    (11, "long"),
    (18, "long"),
    (19, "decimal"),
    (38, "decimal"),
])
def test_integer_width_boundaries(decimal_type, precision, expected):
    assert resolve_numeric_width(decimal_type, precision, 0) == expected


def test_nonzero_scale_keeps_display_name(decimal_type):
    assert resolve_numeric_width(decimal_type, 5, 2) == "decimal"
    assert resolve_numeric_width(decimal_type, 18, 1) == "decimal"


def test_missing_precision_counts_as_zero(decimal_type):
    assert resolve_numeric_width(decimal_type, None, None) == "decimal"


def test_width_not_applied_to_non_numeric_or_int():
    assert resolve_numeric_width(classify("varchar", "string"), 5, 0) == "string"
    assert resolve_numeric_width(classify("int", "int32"), 18, 0) == "int"


def test_net_code_name_reads_descriptor(decimal_type):
    class Descriptor:
        precision = 9
        scale = 0

    assert decimal_type.net_code_name(Descriptor()) == "int"


def test_string_clob():
    assert classify("ntext", "string").is_string_clob
    assert classify("TEXT", "string").is_string_clob
    assert classify("clob", "string").is_string_clob
    assert not classify("VARCHAR", "string").is_string_clob
    # not a string, so never a clob
    assert not classify("text", "int32").is_string_clob


def test_classification_flags():
    number = classify("int", "int32")
    assert number.is_int and number.is_numeric
    assert not number.is_string and not number.is_float

    single = classify("real", "float32")
    assert single.is_float and single.is_numeric

    double = classify("float", "float64")
    assert double.is_numeric and not double.is_float

    when = classify("datetime", "datetime")
    assert when.is_date_time and not when.is_numeric


def test_classification_is_stable():
    data_type = classify("nvarchar", "string")
    first = (data_type.is_string, data_type.is_int, data_type.is_float,
             data_type.is_date_time, data_type.is_numeric)
    for _ in range(3):
        again = (data_type.is_string, data_type.is_int, data_type.is_float,
                 data_type.is_date_time, data_type.is_numeric)
        assert again == first


@pytest.mark.parametrize("hint", [None, ""])
def test_empty_hint_has_no_classification(hint):
    data_type = DataType("varchar", hint)
    assert not any([
        data_type.is_string,
        data_type.is_int,
        data_type.is_float,
        data_type.is_date_time,
        data_type.is_numeric,
        data_type.is_string_clob,
    ])
    assert data_type.net_data_type_cs_name is None


@pytest.mark.parametrize("native,hint,expected", [
    ("varchar", "string", "string"),
    ("int", "int32", "int"),
    ("int", "System.Int32", "int"),
    ("real", "float32", "float"),
    ("datetime", "datetime", "DateTime"),
    ("bit", "bool", "bool"),
    ("smallint", "int16", "short"),
    ("bigint", "int64", "long"),
    ("float", "float64", "double"),
    ("money", "decimal", "decimal"),
    ("uniqueidentifier", "guid", "guid"),
])
def test_display_names(native, hint, expected):
    assert classify(native, hint).net_data_type_cs_name == expected


def test_display_name_override_keeps_flags():
    data_type = classify("int", "int32")
    data_type.net_data_type_cs_name = "CustomerId"
    assert data_type.net_data_type_cs_name == "CustomerId"
    assert data_type.is_int


def test_normalize_portable_hint():
    assert normalize_portable_hint("Int32") == "int32"
    assert normalize_portable_hint("System.String") == "string"
    assert normalize_portable_hint("boolean") == "bool"
    assert normalize_portable_hint("geometry") is None
    assert normalize_portable_hint("") is None


def test_format_create():
    assert classify("decimal", "decimal", create_format="DECIMAL({0},{1})").format_create(
        precision=10, scale=2) == "DECIMAL(10,2)"
    assert classify("varchar", "string", create_format="VARCHAR({0})").format_create(
        length=15) == "VARCHAR(15)"
    assert classify("varchar", "string", create_format="VARCHAR({0})").format_create() is None
    assert classify("int", "int32", create_format="INT").format_create() == "INT"


def test_str():
    assert str(classify("int", "int32")) == "int = int32"


def test_classification_cannot_be_reassigned():
    data_type = classify("varchar", "string")
    for flag in ("is_string", "is_int", "is_float", "is_date_time", "is_numeric", "is_string_clob"):
        with pytest.raises(AttributeError):
            setattr(data_type, flag, True)
    assert data_type.is_string and not data_type.is_numeric


@pytest.mark.parametrize("native,hint,expected", [
    ("real", "float32", True),
    ("float", "float64", True),
    ("decimal", "decimal", False),
    ("int", "int32", False),
    ("varchar", "string", False),
])
def test_floating_point(native, hint, expected):
    assert classify(native, hint).is_floating_point is expected
