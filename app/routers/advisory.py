"""
CropAI Advisory Router.
Provides disease prediction, crop recommendation and fertilizer suggestion endpoints.
"""
import json
import logging
from typing import Union

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.core.config import Settings, get_settings
from app.schemas.advisory_schemas import (
    CropRecommendationRequest,
    CropRecommendationResponse,
    DiseasePredictionResponse,
    FertilizerOptionsResponse,
    FertilizerSuggestionRequest,
    FertilizerSuggestionResponse,
)
from app.services.crop_recommender import recommend_crop
from app.services.disease_predictor import predict_disease
from app.services.fertilizer_rules import CROP_TYPES, SOIL_TYPES
from app.services.fertilizer_selector import suggest_fertilizer
from app.services.request_validation import (
    CROP_RECOMMENDATION_FIELDS,
    FERTILIZER_SUGGESTION_FIELDS,
    AdvisoryValidationError,
    parse_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["advisory"])


async def _read_json_body(request: Request):
    body = await request.body()
    try:
        return json.loads(body)
    except (ValueError, RecursionError):
        raise AdvisoryValidationError("Request body must be a JSON object")


@router.post("/predict-disease", response_model=DiseasePredictionResponse)
async def predict_disease_endpoint(
    file: Union[UploadFile, str, None] = File(None),
    settings: Settings = Depends(get_settings),
):
    """
    Identify the disease shown in an uploaded leaf image.
    """
    # a plain form field named "file" is not an upload
    if not isinstance(file, StarletteUploadFile):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    try:
        image_bytes = await file.read()
        prediction = await predict_disease(image_bytes, delay=settings.simulated_delay_seconds)
    except Exception as e:
        logger.error(f"Error processing image: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to process image")

    logger.info(f"Disease prediction for {file.filename}: {prediction.disease} ({prediction.confidence:.2f})")
    return prediction


@router.post("/recommend-crop", response_model=CropRecommendationResponse)
async def recommend_crop_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Recommend a crop from soil nutrients and climate.

    Required: nitrogen, phosphorus, potassium, temperature, humidity, ph, rainfall.
    """
    try:
        payload = await _read_json_body(request)
        inputs = parse_payload(payload, CROP_RECOMMENDATION_FIELDS, CropRecommendationRequest)
        recommendation = await recommend_crop(inputs, delay=settings.simulated_delay_seconds)
    except AdvisoryValidationError as e:
        logger.info(f"Rejected crop recommendation request: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(f"Error processing request: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to process request")

    logger.info(f"Crop recommendation: {recommendation.recommended_crop} ({recommendation.confidence:.2f})")
    return recommendation


@router.post("/suggest-fertilizer", response_model=FertilizerSuggestionResponse)
async def suggest_fertilizer_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Suggest a fertilizer from N, P and K levels.

    Required: nitrogen, phosphorus, potassium, cropType, soilType.
    """
    try:
        payload = await _read_json_body(request)
        inputs = parse_payload(payload, FERTILIZER_SUGGESTION_FIELDS, FertilizerSuggestionRequest)
        suggestion = await suggest_fertilizer(
            inputs,
            crop_type=inputs.crop_type,
            soil_type=inputs.soil_type,
            delay=settings.simulated_delay_seconds,
        )
    except AdvisoryValidationError as e:
        logger.info(f"Rejected fertilizer suggestion request: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(f"Error processing request: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to process request")

    logger.info(f"Fertilizer suggestion for {inputs.crop_type}/{inputs.soil_type}: {suggestion.fertilizer}")
    return suggestion


@router.get("/fertilizer-options", response_model=FertilizerOptionsResponse)
async def get_fertilizer_options():
    """Crop and soil types offered by the fertilizer form."""
    return FertilizerOptionsResponse(crop_types=list(CROP_TYPES), soil_types=list(SOIL_TYPES))
