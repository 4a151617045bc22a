"""
Demonstration Scenarios

Scripted, repeatable runs of the framework:
- A fixed cast of active entities sharing one relationship
- One interaction type, re-activated after each scripted change
- The notifications each activation produced
"""

from .scenario import (
    PurchaseQuotationCast,
    ScenarioStep,
    ScenarioRun,
    PURCHASE_QUOTATION_STEPS,
    build_purchase_quotation_cast,
    run_purchase_quotation_demo
)

__all__ = [
    "PurchaseQuotationCast",
    "ScenarioStep",
    "ScenarioRun",
    "PURCHASE_QUOTATION_STEPS",
    "build_purchase_quotation_cast",
    "run_purchase_quotation_demo"
]
