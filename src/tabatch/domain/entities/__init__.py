from .indicator_def import IndicatorDef
from .indicator_group import IndicatorGroup
from .indicator_id import IndicatorId
from .input_series import InputSeries
from .ma_type import MA_TYPE_VALUES, MAType
from .output_spec import OutputDType, OutputSpec
from .param_def import ParamDef
from .param_kind import ParamKind
from .ret_code import RetCode

__all__ = [
    "IndicatorDef",
    "IndicatorGroup",
    "IndicatorId",
    "InputSeries",
    "MAType",
    "MA_TYPE_VALUES",
    "OutputDType",
    "OutputSpec",
    "ParamDef",
    "ParamKind",
    "RetCode",
]
