"""Core data models and state containers for the application."""

import math
from dataclasses import dataclass, field
from decimal import Context, Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple


_CENTS = Decimal("0.01")
_DECIMAL_CONTEXT = Context(prec=400)


class AuthMode(str, Enum):
    """Which auth form is active."""
    LOGIN = "login"
    REGISTER = "register"


class AuthOutcome(str, Enum):
    """Result of a single auth submission."""
    INVALID = "invalid"
    REGISTRATION_FAILED = "registration_failed"
    REGISTERED_LOGIN_FAILED = "registered_login_failed"
    LOGIN_FAILED = "login_failed"
    AUTHENTICATED = "authenticated"


class UploadStatus(str, Enum):
    """Upload/predict state of the in-flight image."""
    IDLE = "idle"
    UPLOADING = "uploading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class PersistStatus(str, Enum):
    """Outcome of the best-effort save after a successful prediction."""
    NOT_ATTEMPTED = "not_attempted"
    SAVED = "saved"
    SAVE_FAILED = "save_failed"


def capitalize_label(label: str) -> str:
    """Uppercase the first character only; the rest is left as is."""
    return label[:1].upper() + label[1:]


def format_confidence(value: Any) -> str:
    """
    Format a confidence score with exactly two decimal places.

    Rounds half-up on the exact value of the parsed float, so 0.125 gives
    "0.13" and 0.876 gives "0.88".

    Raises:
        ValueError: If the value is not a finite number
    """
    try:
        number = float(value)
    except TypeError as e:
        raise ValueError(f"Confidence is not a number: {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"Confidence is not a finite number: {value!r}")
    quantized = Decimal(number).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)
    return f"{quantized:f}"


@dataclass(frozen=True)
class Credentials:
    """Identifier and secret, held only for the duration of a submission."""
    identifier: str
    secret: str

    def to_payload(self) -> Dict[str, str]:
        """Request body in the field names the auth service reads."""
        return {"email": self.identifier, "password": self.secret}

    def __repr__(self) -> str:
        return f"Credentials(identifier={self.identifier!r}, secret='***')"


@dataclass
class Session:
    """Authenticated identity for the current browser session."""
    is_authenticated: bool = False
    display_name: Optional[str] = None


@dataclass(frozen=True)
class UploadedImage:
    """An image selected for prediction."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class PredictionResult:
    """A labelled image returned by the predictor."""
    id: int
    src: str
    title: str
    confidence: str

    @classmethod
    def from_response(cls, data: Dict[str, Any], next_id_hint: int) -> "PredictionResult":
        """
        Build a result from a predictor response.

        Args:
            data: Response body with title, confidence, id and image_src
            next_id_hint: Id used when the server did not assign one

        Raises:
            ValueError: If the label or confidence is missing or malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Prediction response is not an object: {data!r}")
        title = data.get("title")
        if not isinstance(title, str):
            raise ValueError(f"Prediction response has no label: {data!r}")
        if data.get("confidence") is None:
            raise ValueError(f"Prediction response has no confidence: {data!r}")

        return cls(
            id=data.get("id") or next_id_hint,
            src=data.get("image_src") or "",
            title=capitalize_label(title),
            confidence=format_confidence(data["confidence"]),
        )

    def to_save_payload(self) -> Dict[str, str]:
        """Body for the save endpoint."""
        return {
            "title": self.title,
            "confidence": self.confidence,
            "image_src": self.src,
        }

    @property
    def is_displayable(self) -> bool:
        return bool(self.src)


class ResultHistory:
    """Append-only, arrival-ordered list of results for one session."""

    def __init__(self):
        self._results: List[PredictionResult] = []

    def append(self, result: PredictionResult) -> None:
        self._results.append(result)

    @property
    def items(self) -> Tuple[PredictionResult, ...]:
        return tuple(self._results)

    @property
    def next_id(self) -> int:
        """Fallback id for the next result."""
        return len(self._results) + 1

    @property
    def latest(self) -> Optional[PredictionResult]:
        return self._results[-1] if self._results else None

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[PredictionResult]:
        return iter(tuple(self._results))

    def __bool__(self) -> bool:
        return bool(self._results)


@dataclass
class AuthState:
    """
    Auth form fields, error message and session.

    Mutated only through the transition methods below.
    """
    mode: AuthMode = AuthMode.LOGIN
    identifier: str = ""
    secret: str = ""
    confirm_secret: str = ""
    error: str = ""
    session: Session = field(default_factory=Session)

    FIELDS = ("identifier", "secret", "confirm_secret")

    def switch_mode(self, mode: AuthMode) -> None:
        """Change mode, clearing errors; login mode drops the confirmation."""
        self.mode = mode
        self.error = ""
        if mode == AuthMode.LOGIN:
            self.confirm_secret = ""

    def set_field(self, name: str, value: str) -> None:
        if name not in self.FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        setattr(self, name, value or "")
        self.error = ""

    def set_error(self, message: str) -> None:
        self.error = message

    def clear_error(self) -> None:
        self.error = ""

    def authenticate(self) -> None:
        self.session = Session(is_authenticated=True)

    def clear_secrets(self) -> None:
        self.secret = ""
        self.confirm_secret = ""

    def set_display_name(self, name: Optional[str]) -> None:
        self.session.display_name = name

    @property
    def credentials(self) -> Credentials:
        return Credentials(identifier=self.identifier, secret=self.secret)

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated


@dataclass
class PredictionState:
    """
    Current image, result history, message and zoom selection.

    Mutated only through the transition methods below.
    """
    status: UploadStatus = UploadStatus.IDLE
    persist_status: PersistStatus = PersistStatus.NOT_ATTEMPTED
    current_image: Optional[PredictionResult] = None
    history: ResultHistory = field(default_factory=ResultHistory)
    message: Optional[str] = None
    selected: Optional[PredictionResult] = None

    def begin_upload(self) -> None:
        self.message = None
        self.status = UploadStatus.UPLOADING
        self.persist_status = PersistStatus.NOT_ATTEMPTED

    def commit_prediction(self, result: PredictionResult) -> None:
        self.current_image = result
        self.history.append(result)
        self.status = UploadStatus.SUCCEEDED

    def fail_prediction(self, message: str) -> None:
        self.message = message
        self.status = UploadStatus.FAILED

    def record_saved(self) -> None:
        self.persist_status = PersistStatus.SAVED

    def record_save_failed(self, message: str) -> None:
        self.persist_status = PersistStatus.SAVE_FAILED
        self.message = message

    def set_message(self, message: Optional[str]) -> None:
        self.message = message

    def select(self, result: PredictionResult) -> None:
        self.selected = result

    def clear_selection(self) -> None:
        self.selected = None

    @property
    def is_uploading(self) -> bool:
        return self.status == UploadStatus.UPLOADING
