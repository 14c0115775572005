from .list_detections import ListDetectionsUseCase
from .submit_detections import SubmitDetectionsUseCase
from .summarize_detections import SummarizeDetectionsUseCase

__all__ = [
    "ListDetectionsUseCase",
    "SubmitDetectionsUseCase",
    "SummarizeDetectionsUseCase",
]
