"""
Tests for advisory request validation.

1. Required fields are checked in order; the first missing one is reported
2. Zero counts as present; None and blank strings do not
3. Non-numeric (including boolean) and non-finite values are rejected with the field name
"""
import math

import pytest

from app.schemas.advisory_schemas import CropRecommendationRequest, FertilizerSuggestionRequest
from app.services.request_validation import (
    CROP_RECOMMENDATION_FIELDS,
    FERTILIZER_SUGGESTION_FIELDS,
    AdvisoryValidationError,
    InvalidFieldError,
    MissingFieldError,
    parse_payload,
    require_fields,
)


class TestRequireFields:

    def test_reports_first_missing_field(self):
        payload = {"nitrogen": 10, "temperature": 20}
        with pytest.raises(MissingFieldError) as exc_info:
            require_fields(payload, CROP_RECOMMENDATION_FIELDS)
        assert exc_info.value.field == "phosphorus"
        assert exc_info.value.message == "Missing required field: phosphorus"

    def test_zero_is_present(self, crop_payload):
        crop_payload["nitrogen"] = 0
        assert require_fields(crop_payload, CROP_RECOMMENDATION_FIELDS) is crop_payload

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_null_and_blank_are_missing(self, fertilizer_payload, value):
        fertilizer_payload["cropType"] = value
        with pytest.raises(MissingFieldError) as exc_info:
            require_fields(fertilizer_payload, FERTILIZER_SUGGESTION_FIELDS)
        assert exc_info.value.field == "cropType"

    @pytest.mark.parametrize("payload", [[1, 2, 3], "nitrogen", 42, None])
    def test_non_object_payload(self, payload):
        with pytest.raises(AdvisoryValidationError) as exc_info:
            require_fields(payload, FERTILIZER_SUGGESTION_FIELDS)
        assert exc_info.value.message == "Request body must be a JSON object"
        assert exc_info.value.field is None


class TestParsePayload:

    def test_numeric_strings_are_coerced(self):
        payload = {"nitrogen": "40", "phosphorus": "85.5", "potassium": "43", "cropType": "Rice", "soilType": "Loamy"}
        parsed = parse_payload(payload, FERTILIZER_SUGGESTION_FIELDS, FertilizerSuggestionRequest)
        assert parsed.nitrogen == 40.0
        assert parsed.phosphorus == 85.5
        assert parsed.crop_type == "Rice"
        assert parsed.soil_type == "Loamy"

    def test_extra_fields_are_ignored(self, crop_payload):
        crop_payload["notes"] = "north field"
        parsed = parse_payload(crop_payload, CROP_RECOMMENDATION_FIELDS, CropRecommendationRequest)
        assert parsed.rainfall == 202.9

    @pytest.mark.parametrize("field,value", [
        ("humidity", "very humid"),
        ("humidity", True),
        ("rainfall", False),
        ("nitrogen", True),
        ("potassium", False),
    ])
    def test_non_numeric_value_is_invalid(self, crop_payload, field, value):
        crop_payload[field] = value
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_payload(crop_payload, CROP_RECOMMENDATION_FIELDS, CropRecommendationRequest)
        assert exc_info.value.field == field
        assert exc_info.value.message == f"Invalid value for field: {field}"

    @pytest.mark.parametrize("value", [True, False])
    def test_boolean_nutrient_is_invalid(self, fertilizer_payload, value):
        fertilizer_payload["phosphorus"] = value
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_payload(fertilizer_payload, FERTILIZER_SUGGESTION_FIELDS, FertilizerSuggestionRequest)
        assert exc_info.value.field == "phosphorus"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "NaN", "inf"])
    def test_non_finite_value_is_invalid(self, fertilizer_payload, value):
        fertilizer_payload["potassium"] = value
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_payload(fertilizer_payload, FERTILIZER_SUGGESTION_FIELDS, FertilizerSuggestionRequest)
        assert exc_info.value.field == "potassium"

    def test_missing_checked_before_invalid(self, fertilizer_payload):
        fertilizer_payload["nitrogen"] = "abc"
        del fertilizer_payload["soilType"]
        with pytest.raises(MissingFieldError):
            parse_payload(fertilizer_payload, FERTILIZER_SUGGESTION_FIELDS, FertilizerSuggestionRequest)
