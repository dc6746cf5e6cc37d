import pytest

from fieldschema.exceptions import (
    ConfigurationError,
    ContractViolationError,
    ConversionError,
    FieldDataError,
    FieldSchemaError,
    RecordFormatError,
    SchemaDefinitionError,
    UnknownFieldError,
    UnknownTypeError,
)


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (UnknownFieldError.for_field, ("count",), "unknown field: count"),
        (UnknownTypeError.for_field, ("ttl", "duration"), "unknown field type duration for field ttl"),
        (ConversionError.for_value, ("count", "abc"), "error converting input 'abc' for field count"),
        (
            ConversionError.for_value,
            ("count", "abc", "not an integer literal"),
            "error converting input 'abc' for field count: not an integer literal",
        ),
        (ContractViolationError.undeclared_field, ("count",), "field count not in the schema"),
        (SchemaDefinitionError.invalid_entry, ("count", "missing 'type'"), "invalid schema entry 'count': missing 'type'"),
        (RecordFormatError.not_an_object, ("list",), "record must be a JSON object, got list"),
        (
            ConfigurationError.invalid_value,
            ("decode mode", "lenient", "Expected weak"),
            "Invalid value for decode mode: 'lenient'. Expected weak",
        ),
        (ConfigurationError.load_failed, ("schema", "a.json"), "Failed to load schema for a.json"),
    ],
)
def test_error_factories(factory, args, expected):
    exc = factory(*args)
    assert isinstance(exc, FieldSchemaError)
    assert str(exc) == expected


def test_factories_store_context_attributes():
    conversion = ConversionError.for_value("count", [1])
    assert (conversion.field, conversion.value) == ("count", [1])

    cause = UnknownFieldError.for_field("x")
    violation = ContractViolationError.read_failed("x", cause)
    assert str(violation) == "error reading x: unknown field: x"
    assert violation.key == "x"
    assert violation.cause is cause


def test_default_messages():
    assert str(FieldDataError()) == "Field lookup or conversion failed."
    assert str(ConfigurationError()) == "Configuration is invalid or missing"
    assert ConfigurationError(path="x").path == "x"


def test_hierarchy_separates_misuse_from_data_errors():
    for cls in (UnknownFieldError, UnknownTypeError, ConversionError):
        assert issubclass(cls, FieldDataError)
    assert not issubclass(ContractViolationError, FieldDataError)
    assert issubclass(ContractViolationError, FieldSchemaError)
