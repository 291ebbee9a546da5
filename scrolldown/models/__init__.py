from .schemas import CompactMoment, PbpEvent, PbpResponse, StringOrInt

__all__ = [
    "CompactMoment",
    "PbpEvent",
    "PbpResponse",
    "StringOrInt",
]
