"""
Activity Routes - Object timeline and revision detail endpoints
"""

from flask import Blueprint, request
from api_responses import success_response, handle_api_errors
from exceptions import ValidationException
from services import activity_service
from utils import flag_true

activity_bp = Blueprint("activity", __name__, url_prefix="/api/activity")


@activity_bp.route("/timeline")
@handle_api_errors
def get_object_timeline():
    """Timeline of a question, answer or tag"""
    object_id = request.args.get("object_id", "").strip()
    if not object_id:
        raise ValidationException("object_id is required")
    show_vote = flag_true(request.args.get("show_vote", "false"))

    timeline = activity_service.get_object_timeline(object_id, show_vote)
    return success_response(timeline.to_dict())


@activity_bp.route("/timeline/detail")
@handle_api_errors
def get_object_timeline_detail():
    """Old and new content of two revisions, for diff display"""
    old_revision_id = request.args.get("old_revision_id", "").strip()
    new_revision_id = request.args.get("new_revision_id", "").strip()
    if not old_revision_id or not new_revision_id:
        raise ValidationException("old_revision_id and new_revision_id are required")

    detail = activity_service.get_object_timeline_detail(old_revision_id, new_revision_id)
    return success_response(detail.to_dict())
