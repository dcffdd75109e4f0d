"""
Activity type codes.

Activities are stored with an integer code. Each code is mapped once, at import
time, to the object it concerns, the action performed and the label shown on
the timeline.
"""
from __future__ import annotations
from dataclasses import dataclass


class ActivityLabel:
    """Raw action names as they appear in activity keys"""

    ASKED = "asked"
    CLOSED = "closed"
    REOPENED = "reopened"
    ANSWERED = "answered"
    COMMENTED = "commented"
    ACCEPT = "accept"
    ACCEPTED = "accepted"
    EDITED = "edited"
    ROLLBACK = "rollback"
    DELETED = "deleted"
    UNDELETED = "undeleted"
    CREATED = "created"
    PIN = "pin"
    UNPIN = "unpin"
    SHOW = "show"
    HIDE = "hide"
    VOTE_UP = "vote_up"
    VOTE_DOWN = "vote_down"
    VOTED_UP = "voted_up"
    VOTED_DOWN = "voted_down"


# Received-side entries, only meaningful for reputation
HIDDEN_LABELS = frozenset({ActivityLabel.VOTED_UP, ActivityLabel.VOTED_DOWN, ActivityLabel.ACCEPTED})

DISPLAY_LABELS = {
    ActivityLabel.VOTE_UP: "upvote",
    ActivityLabel.VOTE_DOWN: "downvote",
}

VOTE_LABELS = frozenset({ActivityLabel.VOTE_UP, ActivityLabel.VOTE_DOWN})


@dataclass(frozen=True)
class ActivityType:
    code: int
    key: str
    object_type: str
    activity_type: str
    display_label: str
    hidden: bool

    @property
    def is_vote(self):
        return self.activity_type in VOTE_LABELS


UNKNOWN_ACTIVITY_TYPE = ActivityType(
    code=0, key="", object_type="", activity_type="", display_label="", hidden=False
)

# code -> "object_type.activity_type"
ACTIVITY_KEYS = {
    1: "answer.accepted",
    2: "answer.voted_up",
    3: "question.voted_up",
    4: "answer.voted_down",
    5: "question.voted_down",
    6: "answer.vote_up",
    7: "answer.vote_down",
    8: "question.vote_up",
    9: "question.vote_down",
    10: "question.asked",
    11: "question.closed",
    12: "question.reopened",
    13: "question.answered",
    14: "question.commented",
    15: "question.accept",
    16: "question.edited",
    17: "question.rollback",
    18: "question.deleted",
    19: "question.undeleted",
    20: "question.pin",
    21: "question.unpin",
    22: "question.show",
    23: "question.hide",
    30: "answer.answered",
    31: "answer.commented",
    32: "answer.edited",
    33: "answer.rollback",
    34: "answer.deleted",
    35: "answer.undeleted",
    40: "tag.created",
    41: "tag.edited",
    42: "tag.rollback",
    43: "tag.deleted",
    44: "tag.undeleted",
    50: "comment.commented",
    51: "comment.edited",
    52: "comment.deleted",
}


def _build_activity_type(code, key):
    object_type, _, activity_type = key.partition(".")
    return ActivityType(
        code=code,
        key=key,
        object_type=object_type,
        activity_type=activity_type,
        display_label=DISPLAY_LABELS.get(activity_type, activity_type),
        hidden=activity_type in HIDDEN_LABELS,
    )


ACTIVITY_TYPES = {code: _build_activity_type(code, key) for code, key in ACTIVITY_KEYS.items()}
ACTIVITY_CODES_BY_KEY = {info.key: code for code, info in ACTIVITY_TYPES.items()}


def get_activity_type(code) -> ActivityType:
    """Mapping for a stored code; unknown codes map to an empty type"""
    return ACTIVITY_TYPES.get(code, UNKNOWN_ACTIVITY_TYPE)


def get_activity_code(key):
    """Stored code for a key such as "question.edited", or None"""
    return ACTIVITY_CODES_BY_KEY.get(key)


def vote_activity_codes():
    """Codes of the vote actions a user can toggle on the timeline"""
    return sorted(code for code, info in ACTIVITY_TYPES.items() if info.is_vote)
