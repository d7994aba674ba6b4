"""Image analyzers that decide whether a picture contains a cat."""

import logging
import random
from abc import ABC, abstractmethod
from typing import Any

from .const.defaults import CAT_LABEL, DEFAULT_AWS_REGION, REKOGNITION_MAX_LABELS
from .exceptions import ImageAnalysisError

_LOGGER = logging.getLogger(__name__)


class ImageAnalyzer(ABC):
    """Answers whether an image contains a cat."""

    @abstractmethod
    def image_contains_cat(self, image: bytes, confidence_threshold: float) -> bool:
        """Classify an image.

        Args:
            image: Encoded image data (JPEG/PNG)
            confidence_threshold: Minimum confidence, in percent, to accept a match

        Returns:
            True if a cat was found at or above the threshold

        Raises:
            ImageAnalysisError: If the image could not be analyzed
        """


class FakeImageAnalyzer(ImageAnalyzer):
    """Analyzer that answers at random.

    Useful for demos and for exercising the alarm rules without a real
    classifier. Pass ``seed`` for repeatable answers.
    """

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def image_contains_cat(self, image: bytes, confidence_threshold: float) -> bool:
        result = self._random.random() < 0.5
        _LOGGER.debug(f"Fake analysis of {len(image)} bytes: cat={result}")
        return result


class RekognitionImageAnalyzer(ImageAnalyzer):
    """Analyzer backed by AWS Rekognition label detection."""

    def __init__(self, client: Any | None = None, region: str = DEFAULT_AWS_REGION):
        """Initialize analyzer.

        Args:
            client: Pre-built Rekognition client; created with boto3 on first use if omitted
            region: AWS region used when creating the client
        """
        self._client = client
        self.region = region

    def _get_client(self) -> Any:
        if self._client is None:
            import boto3

            _LOGGER.debug(f"Creating Rekognition client in {self.region}")
            self._client = boto3.client("rekognition", region_name=self.region)
        return self._client

    def image_contains_cat(self, image: bytes, confidence_threshold: float) -> bool:
        try:
            response = self._get_client().detect_labels(
                Image={"Bytes": image},
                MaxLabels=REKOGNITION_MAX_LABELS,
                MinConfidence=float(confidence_threshold),
            )
        except Exception as e:
            raise ImageAnalysisError(f"Rekognition label detection failed: {e}") from e

        labels = response.get("Labels", [])
        _LOGGER.info(
            "Labels: "
            + ", ".join(f"{lbl.get('Name')} ({lbl.get('Confidence', 0):.1f}%)" for lbl in labels)
        )
        return any(str(lbl.get("Name", "")).lower() == CAT_LABEL for lbl in labels)
