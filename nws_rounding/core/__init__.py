"""Core data models and exceptions."""

from nws_rounding.core.models import (
    # Enums
    TemperatureUnit,
    Pipeline,
    # Pipeline steps
    RoundStep,
    ConvertStep,
    Step,
    PIPELINE_STEPS,
    SETTLEMENT_STEPS,
    TRUE_UNITS,
    # Data classes
    ASOSSteps,
    METARSteps,
    UncertaintyRange,
    PrintedOutcome,
    PrintedDistribution,
)

from nws_rounding.core.exceptions import (
    RoundingError,
    TemperatureDomainError,
    RoundingConsistencyError,
    UnreachableDisplayError,
)

__all__ = [
    "TemperatureUnit",
    "Pipeline",
    "RoundStep",
    "ConvertStep",
    "Step",
    "PIPELINE_STEPS",
    "SETTLEMENT_STEPS",
    "TRUE_UNITS",
    "ASOSSteps",
    "METARSteps",
    "UncertaintyRange",
    "PrintedOutcome",
    "PrintedDistribution",
    "RoundingError",
    "TemperatureDomainError",
    "RoundingConsistencyError",
    "UnreachableDisplayError",
]
