"""
Fixed agronomic thresholds and canned plans for fertilizer suggestion.

This module centralizes constants so the selector stays deterministic
and consistent across services and tests.
"""

# mg/kg; a reading strictly below the threshold is "Low"
NUTRIENT_THRESHOLDS = {
    "nitrogen": 50.0,
    "phosphorus": 30.0,
    "potassium": 30.0,
}

PLAN_NPK_10_26_26 = {
    "fertilizer": "NPK-10-26-26",
    "description": (
        "NPK-10-26-26 is a complex fertilizer containing 10% Nitrogen, 26% Phosphorus, and 26% Potassium. "
        "It's ideal for crops requiring higher phosphorus and potassium than nitrogen."
    ),
    "application_rate": "250-300 kg/ha",
    "alternatives": [
        {"name": "DAP + MOP", "ratio": "100 kg/ha + 50 kg/ha"},
        {"name": "SSP + Urea", "ratio": "250 kg/ha + 30 kg/ha"},
    ],
}

PLAN_UREA = {
    "fertilizer": "Urea",
    "description": (
        "Urea is a nitrogen-rich fertilizer with 46% nitrogen content. "
        "It's suitable for crops that require a nitrogen boost without additional phosphorus or potassium."
    ),
    "application_rate": "100-150 kg/ha",
    "alternatives": [
        {"name": "Ammonium Sulfate", "ratio": "200 kg/ha"},
        {"name": "Calcium Ammonium Nitrate", "ratio": "180 kg/ha"},
    ],
}

PLAN_BALANCED_NPK = {
    "fertilizer": "Balanced NPK 20-20-20",
    "description": (
        "A balanced fertilizer with equal parts nitrogen, phosphorus, and potassium. "
        "Suitable for maintaining overall soil fertility."
    ),
    "application_rate": "200-250 kg/ha",
    "alternatives": [
        {"name": "Organic Compost", "ratio": "5-10 tons/ha"},
        {"name": "NPK 15-15-15", "ratio": "300 kg/ha"},
    ],
}

APPLICATION_RECOMMENDATIONS = [
    "Apply in two split doses: 60% as basal application and 40% after 30 days of sowing",
    "Incorporate into soil 5-10 cm deep for best results",
    "Consider adding organic matter to improve soil structure and nutrient retention",
    "Monitor crop response and adjust future applications accordingly",
]

CROP_TYPES = [
    "Rice", "Maize", "Chickpea", "Kidney Beans", "Pigeon Peas", "Moth Beans",
    "Mung Bean", "Black Gram", "Lentil", "Pomegranate", "Banana", "Mango",
    "Grapes", "Watermelon", "Muskmelon", "Apple", "Orange", "Papaya",
    "Coconut", "Cotton", "Jute", "Coffee",
]

SOIL_TYPES = ["Sandy", "Loamy", "Black", "Red", "Clayey", "Alluvial"]
