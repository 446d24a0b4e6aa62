"""Strongly typed identifiers for news feed entities.

Identifiers are integers assigned by the store and strictly increasing per
table, so they double as the final tie-break in every feed ordering.
"""

from typing import NewType

UserId = NewType("UserId", int)
NewsId = NewType("NewsId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
SaveId = NewType("SaveId", int)
FollowId = NewType("FollowId", int)
