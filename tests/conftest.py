"""Shared pytest fixtures for record, scoring and codec tests."""

from __future__ import annotations

import pytest

from prr.codec import StateCodec
from prr.model import AssessmentRecord
from prr.types import ControlLevel, DataType, Scope


@pytest.fixture()
def codec() -> StateCodec:
    """Codec bound to the current format version."""
    return StateCodec()


@pytest.fixture()
def max_record() -> AssessmentRecord:
    """Record with every field at the top of its domain."""
    return AssessmentRecord(
        scope=Scope.BOTH,
        data_type=DataType.BOTH,
        ease=5,
        confidentiality=3,
        integrity=3,
        availability=3,
        avg=2,
        inference=3,
        singling=True,
        linkage_internal_to_external=True,
        linkage_external_to_internal=True,
        reid=True,
        prevention=ControlLevel.STRONG,
        detection=ControlLevel.STRONG,
        response=ControlLevel.STRONG,
        privacy_budget=ControlLevel.STRONG,
        override_likelihood=3,
        override_impact=3,
        override_overall=5,
    )


@pytest.fixture()
def min_record() -> AssessmentRecord:
    """Record with every field at the bottom of its domain."""
    return AssessmentRecord(scope=Scope.SECURITY, data_type=DataType.AGGREGATED, ease=1)
