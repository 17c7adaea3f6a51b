"""Application configuration and constants."""

# Defaults shown when the converter first opens
DEFAULT_FROM_UNIT = "Meter"
DEFAULT_TO_UNIT = "Centimeter"

# Results are always displayed with this many decimals
DECIMAL_PLACES = 2

# User-facing messages
INVALID_NUMBER_MESSAGE = "Please enter a valid number"
NOT_AVAILABLE_MESSAGE = "Conversion not available"

# Relative tolerance when checking that f * g ~= 1 for inverse pairs
INVERSE_TOLERANCE = 1e-4

# Measurement categories and their units (display order)
MEASUREMENT_UNITS = {
    "Length": ["Meter", "Centimeter", "Kilometer", "Mile", "Foot"],
    "Weight": ["Kilogram", "Gram", "Pound", "Ounce"],
}

# Multiplication factors: CONVERSION_FACTORS[source][target]
CONVERSION_FACTORS = {
    "Meter": {
        "Centimeter": 100,
        "Kilometer": 0.001,
        "Mile": 0.000621371,
        "Foot": 3.28084,
    },
    "Centimeter": {
        "Meter": 0.01,
        "Kilometer": 0.00001,
        "Mile": 0.00000621371,
        "Foot": 0.0328084,
    },
    "Kilometer": {
        "Meter": 1000,
        "Centimeter": 100000,
        "Mile": 0.621371,
        "Foot": 3280.84,
    },
    "Mile": {
        "Meter": 1609.34,
        "Centimeter": 160934,
        "Kilometer": 1.60934,
        "Foot": 5280,
    },
    "Foot": {
        "Meter": 0.3048,
        "Centimeter": 30.48,
        "Kilometer": 0.0003048,
        "Mile": 0.000189394,
    },
    "Kilogram": {
        "Gram": 1000,
        "Pound": 2.20462,
        "Ounce": 35.274,
    },
    "Gram": {
        "Kilogram": 0.001,
        "Pound": 0.00220462,
        "Ounce": 0.035274,
    },
    "Pound": {
        "Kilogram": 0.453592,
        "Gram": 453.592,
        "Ounce": 16,
    },
    "Ounce": {
        "Kilogram": 0.0283495,
        "Gram": 28.3495,
        "Pound": 0.0625,
    },
}
