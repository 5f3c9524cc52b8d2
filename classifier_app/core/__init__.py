"""Core client logic package (framework-agnostic)."""

from .models import (
    AuthMode,
    AuthOutcome,
    AuthState,
    Credentials,
    PersistStatus,
    PredictionResult,
    PredictionState,
    ResultHistory,
    Session,
    UploadedImage,
    UploadStatus,
)
from .auth import AuthSession
from .uploader import PredictionUploader
from .keyboard import KeyboardListener, Subscription
from .exceptions import AppError, ApiError, AuthorizationError, ServerError, ValidationError

__all__ = [
    "AuthMode",
    "AuthOutcome",
    "AuthState",
    "Credentials",
    "PersistStatus",
    "PredictionResult",
    "PredictionState",
    "ResultHistory",
    "Session",
    "UploadedImage",
    "UploadStatus",
    "AuthSession",
    "PredictionUploader",
    "KeyboardListener",
    "Subscription",
    "AppError",
    "ApiError",
    "AuthorizationError",
    "ServerError",
    "ValidationError",
]
