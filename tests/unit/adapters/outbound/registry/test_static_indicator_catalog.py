from __future__ import annotations

import pytest

from tabatch.adapters.outbound.compute_numba import numba_kernels
from tabatch.adapters.outbound.registry import StaticIndicatorCatalog
from tabatch.domain.definitions import all_defs
from tabatch.domain.entities import IndicatorId
from tabatch.domain.errors import UnknownIndicatorError
from tabatch.wiring import build_catalog


def test_catalog_lists_every_definition_in_declaration_order() -> None:
    """
    Verify catalog listing preserves hard definition order and lookup by id.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        `build_catalog()` pairs `all_defs()` with `numba_kernels()`.
    Raises:
        AssertionError: If listing or lookup differ from definitions.
    Side Effects:
        None.
    """
    catalog = build_catalog()
    defs = all_defs()

    assert catalog.list_defs() == defs
    assert len(catalog) == 158
    assert "bbands" in catalog
    assert IndicatorId("cdl_doji") in catalog

    descriptor = catalog.get(IndicatorId("bbands"))
    assert descriptor.definition.output.arity == 3
    assert descriptor.indicator_id == IndicatorId("bbands")


def test_catalog_lookup_of_unknown_id_raises() -> None:
    with pytest.raises(UnknownIndicatorError):
        build_catalog().get(IndicatorId("hull_ma"))


def test_catalog_rejects_definition_without_kernel() -> None:
    kernels = dict(numba_kernels())
    kernels.pop("sma")
    with pytest.raises(ValueError, match="no kernel registered"):
        StaticIndicatorCatalog(defs=all_defs(), kernels=kernels)


def test_catalog_rejects_orphan_kernels_and_duplicate_ids() -> None:
    """
    Verify fail-fast checks for kernels without definitions and repeated ids.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        None.
    Raises:
        AssertionError: If inconsistent inputs are accepted.
    Side Effects:
        None.
    """
    defs = all_defs()
    kernels = numba_kernels()
    sma = next(d for d in defs if d.indicator_id.value == "sma")

    with pytest.raises(ValueError, match="kernels without definitions"):
        StaticIndicatorCatalog(defs=(sma,), kernels={"sma": kernels["sma"], "ema": kernels["ema"]})
    with pytest.raises(ValueError, match="duplicate indicator_id"):
        StaticIndicatorCatalog(defs=(sma, sma), kernels={"sma": kernels["sma"]})
