"""
Pydantic schemas for the CropAI advisory endpoints.
Field names match the JSON contract consumed by the web frontend.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List
from enum import Enum


# ==================== ENUMS ====================

class NutrientStatus(str, Enum):
    """Classification of a single nutrient reading."""
    LOW = "Low"
    OPTIMAL = "Optimal"


# ==================== REQUEST SCHEMAS ====================

def reject_bool(value: Any) -> Any:
    """Booleans are not readings, even though float() accepts them."""
    if isinstance(value, bool):
        raise ValueError("boolean is not a numeric value")
    return value


class NutrientReading(BaseModel):
    """Soil macronutrient levels in mg/kg."""
    nitrogen: float = Field(..., allow_inf_nan=False, description="Nitrogen mg/kg")
    phosphorus: float = Field(..., allow_inf_nan=False, description="Phosphorus mg/kg")
    potassium: float = Field(..., allow_inf_nan=False, description="Potassium mg/kg")

    @field_validator("nitrogen", "phosphorus", "potassium", mode="before")
    @classmethod
    def nutrients_not_bool(cls, v):
        return reject_bool(v)


class CropRecommendationRequest(NutrientReading):
    """Soil and climate parameters for crop recommendation."""
    temperature: float = Field(..., allow_inf_nan=False, description="Temperature °C")
    humidity: float = Field(..., allow_inf_nan=False, description="Relative humidity %")
    ph: float = Field(..., allow_inf_nan=False, description="Soil pH")
    rainfall: float = Field(..., allow_inf_nan=False, description="Rainfall mm")

    @field_validator("temperature", "humidity", "ph", "rainfall", mode="before")
    @classmethod
    def climate_not_bool(cls, v):
        return reject_bool(v)


class FertilizerSuggestionRequest(NutrientReading):
    """Nutrient levels plus crop and soil context for fertilizer suggestion."""
    model_config = ConfigDict(populate_by_name=True)

    crop_type: str = Field(..., alias="cropType", min_length=1, max_length=100)
    soil_type: str = Field(..., alias="soilType", min_length=1, max_length=100)


# ==================== RESPONSE SCHEMAS ====================

class DiseasePredictionResponse(BaseModel):
    disease: str
    confidence: float
    description: str
    treatment: List[str]


class CropAlternative(BaseModel):
    crop: str
    confidence: float


class CropRecommendationResponse(BaseModel):
    recommended_crop: str
    confidence: float
    alternatives: List[CropAlternative]
    description: str
    growing_conditions: str


class NutrientDeficiency(BaseModel):
    """Per-nutrient status derived from the submitted reading."""
    nitrogen: NutrientStatus
    phosphorus: NutrientStatus
    potassium: NutrientStatus


class FertilizerAlternative(BaseModel):
    name: str
    ratio: str


class FertilizerPlan(BaseModel):
    """One of the fixed fertilizer plans."""
    fertilizer: str
    description: str
    application_rate: str
    alternatives: List[FertilizerAlternative]


class FertilizerSuggestionResponse(FertilizerPlan):
    deficiency: NutrientDeficiency
    recommendations: List[str]


class FertilizerOptionsResponse(BaseModel):
    """Crop and soil choices offered by the fertilizer form."""
    crop_types: List[str]
    soil_types: List[str]
