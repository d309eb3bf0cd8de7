from .errors import InputValidationError, ProxyError, UpstreamFailure, UpstreamRateLimited

__all__ = ["InputValidationError", "ProxyError", "UpstreamFailure", "UpstreamRateLimited"]
