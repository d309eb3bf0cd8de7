from .youtube import extract_video_id

__all__ = ["extract_video_id"]
