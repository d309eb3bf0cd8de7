from .internal import ConversionRequest, ConversionResult, OutputType
from .request import DownloadQuery
from .response import DownloadResponse, ErrorResponse, FailureResponse, RateLimitedResponse

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "DownloadQuery",
    "DownloadResponse",
    "ErrorResponse",
    "FailureResponse",
    "OutputType",
    "RateLimitedResponse",
]
