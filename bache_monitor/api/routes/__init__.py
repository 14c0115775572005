from .detection_controller import router as detection_router


__all__ = ["detection_router"]
