from .definitions import all_defs
from .entities import (
    MA_TYPE_VALUES,
    IndicatorDef,
    IndicatorGroup,
    IndicatorId,
    InputSeries,
    MAType,
    OutputDType,
    OutputSpec,
    ParamDef,
    ParamKind,
    RetCode,
)
from .errors import (
    ComputationError,
    ComputeBudgetExceeded,
    IndicatorArgumentError,
    InsufficientData,
    MissingInputSeriesError,
    UnknownIndicatorError,
)

__all__ = [
    "ComputationError",
    "ComputeBudgetExceeded",
    "IndicatorArgumentError",
    "IndicatorDef",
    "IndicatorGroup",
    "IndicatorId",
    "InputSeries",
    "InsufficientData",
    "MAType",
    "MA_TYPE_VALUES",
    "MissingInputSeriesError",
    "OutputDType",
    "OutputSpec",
    "ParamDef",
    "ParamKind",
    "RetCode",
    "UnknownIndicatorError",
    "all_defs",
]
