from .analyze_room import AnalyzeRoomUseCase, decode_image

__all__ = ["AnalyzeRoomUseCase", "decode_image"]
