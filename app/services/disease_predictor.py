"""
Disease prediction stub.
Accepts an uploaded leaf image and returns a fixed diagnosis after a simulated delay.
"""
import asyncio
import base64
import logging

from app.schemas.advisory_schemas import DiseasePredictionResponse

logger = logging.getLogger(__name__)

LATE_BLIGHT_PREDICTION = {
    "disease": "Late Blight",
    "confidence": 0.92,
    "description": (
        "Late blight is a plant disease caused by the oomycete pathogen Phytophthora infestans. "
        "It primarily affects potatoes and tomatoes, causing significant crop losses worldwide."
    ),
    "treatment": [
        "Apply fungicides containing chlorothalonil, mancozeb, or copper compounds",
        "Remove and destroy infected plant parts",
        "Ensure proper spacing between plants for good air circulation",
        "Avoid overhead irrigation to keep foliage dry",
    ],
}


def encode_image(image_bytes: bytes) -> str:
    """Encode raw image bytes as a base64 string."""
    return base64.b64encode(image_bytes).decode("ascii")


async def predict_disease(image_bytes: bytes, delay: float = 0.0) -> DiseasePredictionResponse:
    """Predict the disease shown in an image."""
    image_b64 = encode_image(image_bytes)
    logger.debug(f"Encoded image: {len(image_bytes)} bytes -> {len(image_b64)} base64 chars")

    if delay > 0:
        await asyncio.sleep(delay)
    return DiseasePredictionResponse(**LATE_BLIGHT_PREDICTION)
