"""
Builds empty matrices from configuration.
"""
from __future__ import annotations

from enum import Enum
from typing import Union

from eisenhower.core.config import Settings, get_settings
from eisenhower.core.exceptions import ConfigurationError
from eisenhower.matrix.list_matrix import ListMatrix
from eisenhower.matrix.set_matrix import SetMatrix

AnyMatrix = Union[ListMatrix, SetMatrix]


class MatrixKind(Enum):
    LIST = "list"
    SET = "set"


_MATRIX_TYPES: dict[MatrixKind, type[ListMatrix] | type[SetMatrix]] = {
    MatrixKind.LIST: ListMatrix,
    MatrixKind.SET: SetMatrix,
}


def create_matrix(
    kind: MatrixKind | str | None = None,
    settings: Settings | None = None,
) -> AnyMatrix:
    """
    Create an empty matrix.

    Args:
        kind: "list" or "set"; falls back to the configured default
        settings: Settings to read the default from (loaded when omitted)

    Raises:
        ConfigurationError: If the kind is unknown
    """
    if kind is None:
        kind = (settings or get_settings()).matrix.kind
    try:
        resolved = kind if isinstance(kind, MatrixKind) else MatrixKind(str(kind).strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown matrix kind: {kind!r}",
            {"kind": kind, "allowed": [k.value for k in MatrixKind]},
        ) from None
    return _MATRIX_TYPES[resolved]()
