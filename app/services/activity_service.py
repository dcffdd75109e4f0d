"""Activity timeline of questions, answers and tags.

Only failures to resolve the object or revision itself are raised. Missing
users, comments that cannot be loaded and revisions that cannot be decoded are
logged and leave the corresponding fields empty.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List

import structlog

from activity_types import get_activity_type
from constants import ACTIVITY_CANCELLED, OBJECT_TYPE_COMMENT
from exceptions import AnswerException
from repositories.activity_repository import ActivityRepository
from repositories.revision_repository import RevisionRepository
from repositories.user_repository import UserRepository
from services import comment_service, object_info_service
from services.object_info_service import ObjectInfo
from services.revision_service import ObjectTimelineDetail, decode_revision
from utils import to_unix

logger = structlog.get_logger("activity")


@dataclass
class TimelineItem:
    activity_id: int
    object_id: str
    revision_id: str
    object_type: str
    activity_type: str
    created_at: int
    cancelled: bool = False
    cancelled_at: int = 0
    username: str = ""
    user_display_name: str = ""
    comment: str = ""


@dataclass
class ObjectTimeline:
    object_info: ObjectInfo
    timeline: List[TimelineItem] = field(default_factory=list)

    def to_dict(self):
        return asdict(self)


@dataclass
class ObjectTimelineDetailPair:
    old_revision: ObjectTimelineDetail
    new_revision: ObjectTimelineDetail

    def to_dict(self):
        return asdict(self)


def _timeline_item(activity, activity_type):
    item = TimelineItem(
        activity_id=activity.id,
        object_id=activity.object_id,
        revision_id=str(activity.revision_id or 0),
        object_type=activity_type.object_type,
        activity_type=activity_type.display_label,
        created_at=to_unix(activity.created_at),
        cancelled=activity.cancelled == ACTIVITY_CANCELLED,
    )
    if item.cancelled:
        item.cancelled_at = to_unix(activity.cancelled_at)
    return item


def get_object_timeline(object_id, show_vote=False) -> ObjectTimeline:
    """Display-ready history of an object, newest first"""
    object_info = object_info_service.get_info(object_id)
    result = ObjectTimeline(object_info=object_info)

    for activity in ActivityRepository.get_object_all_activity(object_id, show_vote):
        activity_type = get_activity_type(activity.activity_type)
        if activity_type.hidden:
            continue
        item = _timeline_item(activity, activity_type)

        user_info, exists = UserRepository.get_user_basic_info_by_id(activity.user_id)
        if exists:
            item.username = user_info["username"]
            item.user_display_name = user_info["display_name"]

        if item.object_type == OBJECT_TYPE_COMMENT:
            try:
                item.comment = comment_service.get_comment(item.object_id).parsed_text
            except AnswerException as e:
                logger.error("timeline comment lookup failed", comment_id=item.object_id, error=e.message)

        result.timeline.append(item)
    return result


def get_object_timeline_detail(old_revision_id, new_revision_id) -> ObjectTimelineDetailPair:
    """Both sides of a revision diff"""
    return ObjectTimelineDetailPair(
        old_revision=get_one_object_detail(old_revision_id),
        new_revision=get_one_object_detail(new_revision_id),
    )


def get_one_object_detail(revision_id) -> ObjectTimelineDetail:
    revision = RevisionRepository.get_revision(revision_id)
    object_info = object_info_service.get_info(revision.object_id)

    try:
        content = decode_revision(object_info.object_type, revision.content)
    except KeyError:
        logger.error("unknown revision object type", revision_id=revision.id, object_type=object_info.object_type)
        return ObjectTimelineDetail()
    except (ValueError, TypeError, RecursionError) as e:
        logger.error("revision parsing error", revision_id=revision.id, error=str(e))
        return ObjectTimelineDetail()
    return content.to_detail(object_info.title)
