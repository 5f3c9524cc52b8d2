"""Upload-then-predict workflow with a best-effort save."""

import logging
from typing import Optional

from ..constants import Messages
from .exceptions import ApiError, AuthorizationError
from .models import PredictionResult, PredictionState, UploadedImage

logger = logging.getLogger(__name__)


class PredictionUploader:
    """
    Submits images to the predictor and keeps the result history.

    A result is committed to the history as soon as the prediction succeeds.
    The save that follows only ever changes ``state.message``.
    """

    def __init__(self, client, state: Optional[PredictionState] = None):
        self.client = client
        self.state = state or PredictionState()

    def upload_and_predict(
        self,
        image: UploadedImage,
        next_id_hint: Optional[int] = None,
    ) -> Optional[PredictionResult]:
        """
        Predict a label for an image, show it, then try to save it.

        Args:
            image: The selected image
            next_id_hint: Id to use if the server does not assign one
                (defaults to the history's next id)

        Returns:
            The committed PredictionResult, or None if the prediction failed
        """
        state = self.state
        state.begin_upload()
        if next_id_hint is None:
            next_id_hint = state.history.next_id

        logger.info(f"Uploading '{image.filename}' ({image.size_bytes} bytes) for prediction")
        try:
            data = self.client.predict(image)
            result = PredictionResult.from_response(data, next_id_hint)
        except (ApiError, ValueError) as e:
            logger.error(f"Error during prediction: {e}")
            state.fail_prediction(Messages.PREDICTION_FAILED)
            return None

        state.commit_prediction(result)
        logger.info(f"Prediction response received: {result.title} ({result.confidence}), id={result.id}")

        self.persist(result)
        return result

    def persist(self, result: PredictionResult) -> bool:
        """
        Save a result remotely. Failures only set an advisory message.

        Returns:
            True if the save succeeded
        """
        try:
            self.client.save_prediction(**result.to_save_payload())
        except AuthorizationError:
            logger.warning("Prediction not saved: User not authenticated.")
            self.state.record_save_failed(Messages.SAVE_UNAUTHORIZED)
            return False
        except ApiError as e:
            logger.error(f"Error saving prediction: {e}")
            self.state.record_save_failed(Messages.SAVE_FAILED)
            return False

        logger.info(f"Prediction saved: id={result.id}")
        self.state.record_saved()
        return True

    def select(self, result: Optional[PredictionResult]) -> bool:
        """Open the zoom view for a result. Results without an image are rejected."""
        if result is None or not result.is_displayable:
            logger.error("Image not found or invalid")
            return False
        self.state.select(result)
        return True

    def close_zoom(self) -> None:
        self.state.clear_selection()
