"""
Fertilizer Selector.

Classifies N, P and K readings against fixed thresholds and maps the
resulting status triple to one of three fixed fertilizer plans:

- all three Low               -> NPK-10-26-26
- N Low, P and K Optimal      -> Urea
- any other combination       -> Balanced NPK 20-20-20
"""
import asyncio
import logging
from typing import Any, Dict

from app.schemas.advisory_schemas import (
    FertilizerPlan,
    FertilizerSuggestionResponse,
    NutrientDeficiency,
    NutrientReading,
    NutrientStatus,
)
from app.services.fertilizer_rules import (
    APPLICATION_RECOMMENDATIONS,
    NUTRIENT_THRESHOLDS,
    PLAN_BALANCED_NPK,
    PLAN_NPK_10_26_26,
    PLAN_UREA,
)

logger = logging.getLogger(__name__)


def classify_nutrient(value: float, nutrient: str) -> NutrientStatus:
    """Return Low if value is below the nutrient's threshold, else Optimal."""
    try:
        threshold = NUTRIENT_THRESHOLDS[nutrient]
    except KeyError:
        raise ValueError(f"Unknown nutrient: {nutrient}")
    return NutrientStatus.LOW if value < threshold else NutrientStatus.OPTIMAL


def classify_reading(reading: NutrientReading) -> NutrientDeficiency:
    return NutrientDeficiency(
        nitrogen=classify_nutrient(reading.nitrogen, "nitrogen"),
        phosphorus=classify_nutrient(reading.phosphorus, "phosphorus"),
        potassium=classify_nutrient(reading.potassium, "potassium"),
    )


def select_fertilizer_plan(
    n_status: NutrientStatus,
    p_status: NutrientStatus,
    k_status: NutrientStatus,
) -> FertilizerPlan:
    """Pick the fixed plan for a nutrient status triple."""
    low, optimal = NutrientStatus.LOW, NutrientStatus.OPTIMAL

    if n_status == low and p_status == low and k_status == low:
        plan: Dict[str, Any] = PLAN_NPK_10_26_26
    elif n_status == low and p_status == optimal and k_status == optimal:
        plan = PLAN_UREA
    else:
        plan = PLAN_BALANCED_NPK

    return FertilizerPlan(**plan)


async def suggest_fertilizer(
    reading: NutrientReading,
    crop_type: str,
    soil_type: str,
    delay: float = 0.0,
) -> FertilizerSuggestionResponse:
    """
    Build the full fertilizer suggestion for a reading.

    crop_type and soil_type are accepted for context only and do not
    change the selected plan.
    """
    if delay > 0:
        await asyncio.sleep(delay)

    deficiency = classify_reading(reading)
    plan = select_fertilizer_plan(deficiency.nitrogen, deficiency.phosphorus, deficiency.potassium)

    logger.debug(
        f"Fertilizer for crop={crop_type} soil={soil_type}: "
        f"N={deficiency.nitrogen.value} P={deficiency.phosphorus.value} K={deficiency.potassium.value} -> {plan.fertilizer}"
    )

    return FertilizerSuggestionResponse(
        fertilizer=plan.fertilizer,
        description=plan.description,
        application_rate=plan.application_rate,
        alternatives=plan.alternatives,
        deficiency=deficiency,
        recommendations=list(APPLICATION_RECOMMENDATIONS),
    )
