"""Application constants: endpoints, validation patterns and user messages."""

from typing import Tuple


# Endpoints
REGISTER_PATH = "/auth/register"
LOGIN_PATH = "/auth/login"
USERNAME_PATH = "/auth/get-username"
PREDICT_PATH = "/predictions/predict"
SAVE_PATH = "/predictions/save"

# Multipart field the predictor reads the image from
IMAGE_FIELD = "image"

ALLOWED_IMAGE_TYPES: Tuple[str, ...] = ("image/jpeg", "image/png", "image/webp", "image/gif", "image/bmp")

# Validation
IDENTIFIER_PATTERN = r"[A-Za-z0-9_-]{3,20}"
SECRET_SYMBOLS = "@$!%*#?&"
SECRET_PATTERN = r"(?=.*[A-Za-z])(?=.*\d)(?=.*[@$!%*#?&])[A-Za-z\d@$!%*#?&]{8,}"

# Key that submits the auth form
SUBMIT_KEY = "Enter"


class Messages:
    """User-facing messages."""

    INVALID_IDENTIFIER = "Please enter a valid email address."
    INVALID_SECRET = "Password must be at least 8 characters long, include a number, and a special character."
    SECRET_MISMATCH = "Passwords do not match."
    MISSING_SECRET = "Please enter a password."

    REGISTRATION_FAILED = "Registration failed"
    LOGIN_FAILED = "Login failed"
    WRONG_SECRET = "Password is incorrect"
    AUTO_LOGIN_FAILED = "Registration succeeded, but automatic login failed: "
    USERNAME_UNAVAILABLE = "Logged in, but the username could not be loaded."

    PREDICTION_FAILED = "Prediction failed. Please try again."
    SAVE_UNAUTHORIZED = "Result not saved. Log in to save your predictions."
    SAVE_FAILED = "Error saving prediction."
    IMAGE_NOT_FOUND = "Image not found"
    INVALID_IMAGE = "Please choose an image file."
