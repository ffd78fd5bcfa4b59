from __future__ import annotations

from dataclasses import dataclass

from tabatch.domain.entities import RetCode


@dataclass(frozen=True, slots=True)
class KernelReport:
    """
    Outcome a kernel reports after filling its output buffers.

    `valid_count` counts trailing valid samples and may be zero or negative when the
    input is shorter than the kernel lookback.

    Related: ..ports.compute.indicator_kernel, ..services.window_resolver
    """

    valid_count: int
    ret_code: RetCode = RetCode.SUCCESS

    def __post_init__(self) -> None:
        object.__setattr__(self, "valid_count", int(self.valid_count))
        object.__setattr__(self, "ret_code", RetCode(self.ret_code))

    @property
    def ok(self) -> bool:
        return self.ret_code is RetCode.SUCCESS
