"""Data types understood by the TwinCAT Scope ADS acquisition."""

from __future__ import annotations

from enum import Enum


class DataType(str, Enum):
    """Scope acquisition data types."""

    BIT = "BIT"

    # Signed integer
    INT8 = "INT8"
    INT16 = "INT16"
    INT32 = "INT32"
    INT64 = "INT64"

    # Unsigned integer
    UINT8 = "UINT8"
    UINT16 = "UINT16"
    UINT32 = "UINT32"
    UINT64 = "UINT64"

    # Floating point
    REAL32 = "REAL32"
    REAL64 = "REAL64"


DATA_TYPE_SIZES: dict[DataType, int] = {
    DataType.BIT: 1,
    DataType.INT8: 1,
    DataType.INT16: 2,
    DataType.INT32: 4,
    DataType.INT64: 8,
    DataType.UINT8: 1,
    DataType.UINT16: 2,
    DataType.UINT32: 4,
    DataType.UINT64: 8,
    DataType.REAL32: 4,
    DataType.REAL64: 8,
}


def variable_size_for(data_type: DataType | str) -> int:
    """Byte size of a single value of *data_type*."""
    return DATA_TYPE_SIZES[DataType(data_type)]
