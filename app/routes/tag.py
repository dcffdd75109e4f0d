"""
Tag Routes - Read-only tag listing endpoints
"""

from flask import Blueprint, request
from api_responses import success_response, paginated_response, handle_api_errors, not_found_response
from exceptions import ValidationException
from models.tag import Tag
from repositories.tag_repository import TagRepository
from services.siteinfo_service import get_tag_required
from utils import ensure_utc, flag_true

tag_bp = Blueprint("tag", __name__, url_prefix="/api")

MAX_PAGE_SIZE = 100
QUERY_LIMIT = 5


def serialize_tag(tag):
    created_at = ensure_utc(tag.created_at)
    return {
        "tag_id": tag.id,
        "slug_name": tag.slug_name,
        "display_name": tag.display_name,
        "original_text": tag.original_text,
        "parsed_text": tag.parsed_text,
        "main_tag_slug_name": tag.main_tag_slug_name,
        "follow_count": tag.follow_count,
        "question_count": tag.question_count,
        "recommend": tag.recommend,
        "reserved": tag.reserved,
        "created_at": created_at.isoformat() if created_at else None,
    }


@tag_bp.route("/tags/page")
@handle_api_errors
def get_tag_page():
    page = max(1, request.args.get("page", 1, type=int))
    page_size = min(max(1, request.args.get("page_size", 20, type=int)), MAX_PAGE_SIZE)
    slug_name = request.args.get("slug_name", "").strip()
    query_cond = request.args.get("query_cond", "").strip()

    tag_filter = Tag(slug_name=slug_name) if slug_name else None
    tags, total = TagRepository.get_tag_page(page, page_size, tag_filter, query_cond, get_tag_required())
    return paginated_response([serialize_tag(t) for t in tags], total, page, page_size)


@tag_bp.route("/tags/query")
@handle_api_errors
def query_tags():
    """Autocomplete by slug name prefix, recommended tags without a prefix"""
    name = request.args.get("tag", "").strip()
    has_reserved = flag_true(request.args.get("has_reserved", "false"))
    tags = TagRepository.get_tag_list_by_name(name, QUERY_LIMIT, has_reserved, get_tag_required())
    return success_response([serialize_tag(t) for t in tags])


@tag_bp.route("/tags/recommend")
@handle_api_errors
def get_recommend_tags():
    tags = TagRepository.get_recommend_tag_list(get_tag_required())
    return success_response([serialize_tag(t) for t in tags])


@tag_bp.route("/tags/reserved")
@handle_api_errors
def get_reserved_tags():
    tags = TagRepository.get_reserved_tag_list(get_tag_required())
    return success_response([serialize_tag(t) for t in tags])


@tag_bp.route("/tag")
@handle_api_errors
def get_tag():
    """Single tag by id or slug name"""
    tag_id = request.args.get("id", "").strip()
    slug_name = request.args.get("slug_name", "").strip()
    if not tag_id and not slug_name:
        raise ValidationException("id or slug_name is required")

    tag_required = get_tag_required()
    if tag_id:
        tag = TagRepository.get_tag_by_id(tag_id, tag_required)
    else:
        tag = TagRepository.get_tag_by_slug_name(slug_name, tag_required)
    if tag is None:
        return not_found_response("Tag", tag_id or slug_name)
    return success_response(serialize_tag(tag))
