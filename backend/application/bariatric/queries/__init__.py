"""Queries for the bariatric domain."""

from .get_clinical_snapshot import (
    ClinicalSnapshot,
    GetClinicalSnapshotQuery,
    GetClinicalSnapshotQueryHandler,
)
from .get_supplement_plan import (
    GetSupplementPlanQuery,
    GetSupplementPlanQueryHandler,
    SupplementPlan,
)
from .get_weight_history import GetWeightHistoryQuery, GetWeightHistoryQueryHandler

__all__ = [
    "ClinicalSnapshot",
    "GetClinicalSnapshotQuery",
    "GetClinicalSnapshotQueryHandler",
    "SupplementPlan",
    "GetSupplementPlanQuery",
    "GetSupplementPlanQueryHandler",
    "GetWeightHistoryQuery",
    "GetWeightHistoryQueryHandler",
]
