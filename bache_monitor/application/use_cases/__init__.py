from .detection import (
    ListDetectionsUseCase,
    SubmitDetectionsUseCase,
    SummarizeDetectionsUseCase,
)

__all__ = [
    "ListDetectionsUseCase",
    "SubmitDetectionsUseCase",
    "SummarizeDetectionsUseCase",
]
