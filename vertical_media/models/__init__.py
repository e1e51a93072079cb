from .video import Platform, FailureReason, VideoReference, ParseFailure, ParseResult

__all__ = [
    "Platform",
    "FailureReason",
    "VideoReference",
    "ParseFailure",
    "ParseResult",
]
