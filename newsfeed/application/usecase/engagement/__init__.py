"""Engagement use cases."""

from .set_save import SetSaveRequest, SetSaveResponse, SetSaveUseCase
from .set_vote import SetVoteRequest, SetVoteResponse, SetVoteUseCase

__all__ = [
    "SetSaveRequest",
    "SetSaveResponse",
    "SetSaveUseCase",
    "SetVoteRequest",
    "SetVoteResponse",
    "SetVoteUseCase",
]
