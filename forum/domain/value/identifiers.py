"""Strongly typed identifiers for forum entities.

Identifiers are integers assigned by the store on insert. Post ids are also
rendered into short links, so they must stay compact.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
TagId = NewType("TagId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
DigestHistoryId = NewType("DigestHistoryId", int)
