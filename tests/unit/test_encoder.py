"""Unit tests for the argument encoder."""

import logging
from typing import Any, List

import pytest

from aztec_abi.encoder import ArgumentEncoder, encode_arguments, leaf_count
from aztec_abi.exceptions import (
    ArgumentCountMismatchError,
    ArrayLengthMismatchError,
    EncodingError,
    MissingStructFieldError,
    UnparsableIntegerError,
    UnsupportedValueShapeError,
)
from aztec_abi.fields import Fr
from aztec_abi.types import (
    AbiParameter,
    AbiType,
    ArrayType,
    BooleanType,
    FieldType,
    FunctionAbi,
    FunctionType,
    IntegerType,
    StringType,
    StructField,
    StructType,
)


def encode(abi_type: AbiType, value: Any, name: str = "arg") -> List[Fr]:
    """Encode a single value as the only argument of a call."""
    return ArgumentEncoder([AbiParameter(name, abi_type)], [value]).encode()


def frs(*values: int) -> List[Fr]:
    return [Fr(v) for v in values]


AB_STRUCT = StructType(fields=(StructField("a", FieldType()), StructField("b", BooleanType())))


class TestField:
    """Test encoding of field values."""

    def test_number(self):
        assert encode(FieldType(), 42) == [Fr(42)]

    def test_large_number_is_not_truncated(self):
        assert encode(FieldType(), 1000) == [Fr(1000)]
        assert encode(FieldType(), 2**200) == [Fr(2**200)]

    def test_decimal_string(self):
        big = "21888242871839275222246405745257275088548364400416034343698204186575808495616"
        assert encode(FieldType(), big) == [Fr(int(big))]

    def test_boolean(self):
        assert encode(FieldType(), True) == [Fr(1)]
        assert encode(FieldType(), False) == [Fr(0)]

    def test_surrounding_whitespace_stripped(self):
        assert encode(FieldType(), " 42 ") == [Fr(42)]
        assert encode(IntegerType(False, 32), " 42 ") == [Fr(42)]

    @pytest.mark.parametrize("value", [None, 1.5, -3, "0x10", "abc", [1], {"a": 1}])
    def test_unsupported_shapes(self, value: Any):
        with pytest.raises(UnsupportedValueShapeError):
            encode(FieldType(), value)


class TestBoolean:
    """Test encoding of boolean values."""

    def test_true_and_false(self):
        assert encode(BooleanType(), True) == [Fr(1)]
        assert encode(BooleanType(), False) == [Fr(0)]

    @pytest.mark.parametrize("value", [1, 0, "true", None])
    def test_only_booleans_accepted(self, value: Any):
        with pytest.raises(UnsupportedValueShapeError, match="Expected a boolean"):
            encode(BooleanType(), value)


class TestArray:
    """Test encoding of arrays."""

    def test_flat_array(self):
        assert encode(ArrayType(FieldType(), 3), [1, 2, 3]) == frs(1, 2, 3)

    def test_tuple_accepted(self):
        assert encode(ArrayType(FieldType(), 2), (4, 5)) == frs(4, 5)

    def test_nested_arrays_are_row_major(self):
        value = [[1, 2, 3], [4, 5, 6]]
        assert encode(ArrayType(ArrayType(FieldType(), 3), 2), value) == frs(1, 2, 3, 4, 5, 6)

    def test_short_array_names_parameter(self):
        with pytest.raises(ArrayLengthMismatchError, match="prices") as exc_info:
            encode(ArrayType(FieldType(), 3), [1, 2], name="prices")
        assert exc_info.value.path == "prices"

    def test_long_array_rejected(self):
        with pytest.raises(ArrayLengthMismatchError):
            encode(ArrayType(FieldType(), 3), [1, 2, 3, 4])

    def test_nested_mismatch_names_index_path(self):
        with pytest.raises(ArrayLengthMismatchError) as exc_info:
            encode(ArrayType(ArrayType(FieldType(), 2), 2), [[1, 2], [3]], name="grid")
        assert exc_info.value.path == "grid[1]"

    def test_element_error_names_index_path(self):
        with pytest.raises(UnsupportedValueShapeError) as exc_info:
            encode(ArrayType(BooleanType(), 2), [True, "no"], name="flags")
        assert exc_info.value.path == "flags[1]"

    def test_non_array_rejected(self):
        with pytest.raises(UnsupportedValueShapeError, match="Expected an array"):
            encode(ArrayType(FieldType(), 1), "1")


class TestString:
    """Test encoding of strings."""

    def test_padded_with_zeros(self):
        assert encode(StringType(5), "Bob") == [
            Fr(ord("B")),
            Fr(ord("o")),
            Fr(ord("b")),
            Fr(0),
            Fr(0),
        ]

    def test_exact_length(self):
        assert encode(StringType(2), "hi") == frs(104, 105)

    def test_empty_string(self):
        assert encode(StringType(3), "") == frs(0, 0, 0)

    def test_longer_string_truncated_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="aztec_abi.encoder"):
            result = encode(StringType(2), "abc", name="label")

        assert result == frs(97, 98)
        assert "Truncating label" in caplog.text

    def test_latin1_character_fits(self):
        assert encode(StringType(1), "é") == [Fr(0xE9)]

    def test_wide_character_rejected(self):
        with pytest.raises(UnsupportedValueShapeError, match="does not fit in one byte"):
            encode(StringType(3), "a€b")

    def test_non_string_rejected(self):
        with pytest.raises(UnsupportedValueShapeError, match="Expected a string"):
            encode(StringType(3), 123)


class TestStruct:
    """Test encoding of structs."""

    def test_fields_in_declared_order(self):
        assert encode(AB_STRUCT, {"a": 7, "b": False}) == frs(7, 0)

    def test_input_key_order_does_not_matter(self):
        assert encode(AB_STRUCT, {"b": True, "a": 7}) == frs(7, 1)

    def test_extra_fields_ignored(self):
        assert encode(AB_STRUCT, {"a": 1, "b": True, "c": 99}) == frs(1, 1)

    def test_missing_field_named(self):
        with pytest.raises(MissingStructFieldError, match="b") as exc_info:
            encode(AB_STRUCT, {"a": 1}, name="feed")
        assert exc_info.value.path == "feed.b"

    def test_nested_struct_and_array(self):
        inner = StructType(fields=(StructField("xs", ArrayType(FieldType(), 2)),))
        outer = StructType(fields=(StructField("head", FieldType()), StructField("inner", inner)))

        assert encode(outer, {"head": 1, "inner": {"xs": [2, 3]}}) == frs(1, 2, 3)

    def test_non_object_rejected(self):
        with pytest.raises(UnsupportedValueShapeError, match="Expected an object"):
            encode(AB_STRUCT, [7, False])


class TestInteger:
    """Test encoding of integers."""

    def test_decimal_string(self):
        assert encode(IntegerType(False, 128), "340282366920938463463374607431768211455") == [
            Fr(2**128 - 1)
        ]

    def test_small_number(self):
        assert encode(IntegerType(False, 32), 300) == [Fr(300)]

    def test_unparsable_string(self):
        with pytest.raises(UnparsableIntegerError):
            encode(IntegerType(False, 32), "12abc")

    def test_out_of_range_unsigned(self):
        with pytest.raises(UnparsableIntegerError, match="out of range for u8"):
            encode(IntegerType(False, 8), 256)

    def test_negative_unsigned_rejected(self):
        with pytest.raises(UnparsableIntegerError):
            encode(IntegerType(False, 8), "-1")

    def test_signed_uses_twos_complement(self):
        assert encode(IntegerType(True, 8), -1) == [Fr(255)]
        assert encode(IntegerType(True, 8), "-128") == [Fr(128)]
        assert encode(IntegerType(True, 8), 127) == [Fr(127)]

    def test_signed_out_of_range(self):
        with pytest.raises(UnparsableIntegerError, match="i8"):
            encode(IntegerType(True, 8), 128)

    def test_zero_width_rejected(self):
        with pytest.raises(UnparsableIntegerError, match="Invalid integer width 0"):
            encode(IntegerType(True, 0), 0)

    @pytest.mark.parametrize("value", [True, 1.0, None, [1]])
    def test_unsupported_shapes(self, value: Any):
        with pytest.raises(UnsupportedValueShapeError):
            encode(IntegerType(False, 32), value)


class TestArgumentEncoder:
    """Test top-level encoding across parameters."""

    def test_parameters_are_concatenated_in_order(self):
        params = [
            AbiParameter("a", FieldType()),
            AbiParameter("b", ArrayType(BooleanType(), 2)),
            AbiParameter("c", StringType(2)),
        ]
        result = ArgumentEncoder(params, [5, [True, False], "x"]).encode()
        assert result == frs(5, 1, 0, ord("x"), 0)

    def test_argument_count_mismatch(self):
        params = [AbiParameter("a", FieldType()), AbiParameter("b", FieldType())]
        with pytest.raises(ArgumentCountMismatchError, match="Expected 2 arguments, got 1"):
            ArgumentEncoder(params, [1]).encode()

    def test_first_error_aborts(self):
        """Test that the first failure propagates and nothing is returned."""
        params = [AbiParameter("a", BooleanType()), AbiParameter("b", ArrayType(FieldType(), 2))]
        with pytest.raises(EncodingError) as exc_info:
            ArgumentEncoder(params, ["yes", [1]]).encode()
        assert isinstance(exc_info.value, UnsupportedValueShapeError)
        assert exc_info.value.path == "a"

    def test_no_parameters(self):
        assert ArgumentEncoder([], []).encode() == []

    def test_encode_twice_returns_same_result(self):
        encoder = ArgumentEncoder([AbiParameter("a", FieldType())], [1])
        assert encoder.encode() == [Fr(1)]
        assert encoder.encode() == [Fr(1)]

    def test_encode_arguments_uses_function_parameters(self):
        fn = FunctionAbi(
            name="set",
            function_type=FunctionType.PRIVATE,
            parameters=(AbiParameter("value", FieldType()),),
        )
        assert encode_arguments(fn, ["9"]) == [Fr(9)]


class TestLeafCount:
    """Test that encoded lengths are predictable from types alone."""

    @pytest.mark.parametrize(
        "abi_type, value",
        [
            (FieldType(), 1),
            (BooleanType(), True),
            (IntegerType(False, 64), "18446744073709551615"),
            (StringType(4), "ab"),
            (ArrayType(FieldType(), 3), [1, 2, 3]),
            (ArrayType(StringType(2), 2), ["a", "bc"]),
            (AB_STRUCT, {"a": 7, "b": False}),
            (
                StructType(
                    fields=(
                        StructField("pts", ArrayType(AB_STRUCT, 2)),
                        StructField("name", StringType(3)),
                    )
                ),
                {"pts": [{"a": 1, "b": True}, {"a": 2, "b": False}], "name": "abc"},
            ),
        ],
    )
    def test_encoded_length_matches_leaf_count(self, abi_type: AbiType, value: Any):
        assert len(encode(abi_type, value)) == leaf_count(abi_type)

    def test_leaf_count_values(self):
        assert leaf_count(StringType(31)) == 31
        assert leaf_count(ArrayType(ArrayType(FieldType(), 3), 4)) == 12
        assert leaf_count(StructType(fields=())) == 0
