from __future__ import annotations

from enum import Enum


class ParamKind(str, Enum):
    """
    Supported indicator parameter kinds.

    Related: .param_def, ...application.services.parameter_binder
    """

    INT = "int"
    FLOAT = "float"
    ENUM = "enum"
