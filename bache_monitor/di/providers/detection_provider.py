from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.detection_repository import DetectionRepository
from ...application.use_cases.detection.list_detections import ListDetectionsUseCase
from ...application.use_cases.detection.submit_detections import SubmitDetectionsUseCase
from ...application.use_cases.detection.summarize_detections import SummarizeDetectionsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DetectionProvider:
    """Detection use case provider - registers all detection-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings: Settings = container.get(Settings)

        container.register_factory(
            ListDetectionsUseCase,
            lambda: ListDetectionsUseCase(
                detection_repository=container.get(DetectionRepository),
                max_buffer=settings.max_buffer,
            ),
        )

        container.register_factory(
            SubmitDetectionsUseCase,
            lambda: SubmitDetectionsUseCase(
                detection_repository=container.get(DetectionRepository),
                noise_cm=settings.sensor_noise_cm,
            ),
        )

        container.register_factory(
            SummarizeDetectionsUseCase,
            lambda: SummarizeDetectionsUseCase(
                detection_repository=container.get(DetectionRepository),
                max_buffer=settings.max_buffer,
                trend_window=settings.trend_window,
            ),
        )
