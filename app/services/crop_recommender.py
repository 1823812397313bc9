"""
Crop recommendation stub.
Returns a fixed recommendation after a simulated processing delay.
"""
import asyncio
import logging

from app.schemas.advisory_schemas import CropRecommendationRequest, CropRecommendationResponse

logger = logging.getLogger(__name__)

RICE_RECOMMENDATION = {
    "recommended_crop": "Rice",
    "confidence": 0.89,
    "alternatives": [
        {"crop": "Maize", "confidence": 0.72},
        {"crop": "Cotton", "confidence": 0.65},
        {"crop": "Jute", "confidence": 0.58},
    ],
    "description": (
        "Rice is a cereal grain that is the most widely consumed staple food for a large part of the "
        "world's human population. It is the agricultural commodity with the third-highest worldwide production."
    ),
    "growing_conditions": (
        "Rice grows best in areas with high humidity, prolonged sunshine, and an assured supply of water. "
        "The average temperature required throughout the life period of the crop ranges from 21 to 37°C."
    ),
}


async def recommend_crop(inputs: CropRecommendationRequest, delay: float = 0.0) -> CropRecommendationResponse:
    """Recommend a crop for the given soil and climate parameters."""
    logger.debug(f"Crop recommendation inputs: {inputs.model_dump()}")
    if delay > 0:
        await asyncio.sleep(delay)
    return CropRecommendationResponse(**RICE_RECOMMENDATION)
