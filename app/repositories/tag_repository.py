"""
Repository for Tag database operations

Every read takes `tag_required`, the site-wide "tag required" setting. When it
is off, tags are returned with `recommend` cleared; stored rows are untouched.
"""

from functools import wraps
import logging

from sqlalchemy import or_, update
from sqlalchemy.exc import SQLAlchemyError
from db import db, to_dict
from models.tag import Tag
from constants import (
    OBJECT_TYPE_TAG,
    TAG_STATUS_AVAILABLE,
    TAG_STATUS_DELETED,
    TAG_ATTRIBUTE_RECOMMEND,
    TAG_ATTRIBUTE_RESERVED,
    TAG_QUERY_POPULAR,
    TAG_QUERY_NAME,
    TAG_QUERY_NEWEST,
)
from exceptions import DatabaseException
from repositories.uniqueid_repository import UniqueIDRepository
from utils import now_utc

logger = logging.getLogger("main")

# Columns a filter tag may constrain by equality
FILTER_COLUMNS = (
    "id",
    "main_tag_id",
    "main_tag_slug_name",
    "slug_name",
    "display_name",
    "original_text",
    "follow_count",
    "question_count",
    "recommend",
    "reserved",
    "status",
    "revision_id",
)

# Columns never touched by a full-row update
IMMUTABLE_COLUMNS = ("id", "created_at")

LIST_ORDER = (Tag.recommend.desc(), Tag.reserved.desc(), Tag.id.desc())


def db_errors(action):
    """Roll back and re-raise storage failures as DatabaseException"""

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except SQLAlchemyError as e:
                db.session.rollback()
                raise DatabaseException(f"{action}: {e}") from e

        return wrapper

    return decorator


def mask_recommend(tags, tag_required):
    """
    Clear `recommend` on every tag when tags are not required on the site.
    Masked tags are detached copies so the change can never be flushed.
    """
    if tag_required:
        return tags
    masked = []
    for tag in tags:
        copy = Tag(**to_dict(tag))
        copy.recommend = False
        masked.append(copy)
    return masked


def mask_one(tag, tag_required):
    if tag is None:
        return None
    return mask_recommend([tag], tag_required)[0]


def filter_conditions(tag_filter, exclude=()):
    """Equality predicates for every non-zero field of a filter tag"""
    if tag_filter is None:
        return []
    conditions = []
    for column in FILTER_COLUMNS:
        if column in exclude:
            continue
        value = getattr(tag_filter, column, None)
        if not value:
            continue
        conditions.append(getattr(Tag, column) == value)
    return conditions


class TagRepository:
    """Repository for Tag database operations"""

    @staticmethod
    @db_errors("failed to add tags")
    def add_tag_list(tags):
        """Assign ids and insert all tags in one commit"""
        for tag in tags:
            tag.id = UniqueIDRepository.gen_unique_id_str(OBJECT_TYPE_TAG)
            tag.revision_id = "0"
        db.session.add_all(tags)
        db.session.commit()
        logger.info(f"Added {len(tags)} tags")
        return tags

    @staticmethod
    def get_by_id(id):
        """Get Tag by ID whatever its status, without masking"""
        return db.session.get(Tag, id)

    @staticmethod
    @db_errors("failed to get tags by ids")
    def get_tag_list_by_ids(ids, tag_required):
        """Available tags among ids"""
        tags = (
            Tag.query.filter(Tag.id.in_(ids), Tag.status == TAG_STATUS_AVAILABLE)
            .order_by(*LIST_ORDER)
            .all()
        )
        return mask_recommend(tags, tag_required)

    @staticmethod
    @db_errors("failed to get tag by slug name")
    def get_tag_by_slug_name(slug_name, tag_required):
        """Available tag with this slug name, or None"""
        tag = Tag.query.filter(Tag.slug_name == slug_name, Tag.status == TAG_STATUS_AVAILABLE).first()
        return mask_one(tag, tag_required)

    @staticmethod
    @db_errors("failed to get tag by id")
    def get_tag_by_id(tag_id, tag_required):
        """Available tag with this id, or None"""
        tag = Tag.query.filter(Tag.id == tag_id, Tag.status == TAG_STATUS_AVAILABLE).first()
        return mask_one(tag, tag_required)

    @staticmethod
    @db_errors("failed to get tags by name")
    def get_tag_list_by_name(name, limit, has_reserved, tag_required):
        """
        Tags whose slug name starts with `name`; recommended tags when no
        name is given. Reserved tags are left out unless has_reserved is set.
        """
        query = Tag.query.filter(Tag.status == TAG_STATUS_AVAILABLE)
        if name:
            query = query.filter(Tag.slug_name.startswith(name, autoescape=True))
        else:
            query = query.filter(Tag.recommend == True)
        if not has_reserved:
            query = query.filter(Tag.reserved == False)
        tags = query.order_by(Tag.slug_name.asc(), *LIST_ORDER).limit(limit).all()
        return mask_recommend(tags, tag_required)

    @staticmethod
    @db_errors("failed to get recommend tags")
    def get_recommend_tag_list(tag_required):
        """Recommended tags of any status"""
        # TODO: decide whether deleted tags should be listed here, status is not filtered
        tags = Tag.query.filter(Tag.recommend == True).order_by(Tag.slug_name.asc()).all()
        return mask_recommend(tags, tag_required)

    @staticmethod
    @db_errors("failed to get reserved tags")
    def get_reserved_tag_list(tag_required):
        """Reserved tags of any status"""
        tags = Tag.query.filter(Tag.reserved == True).order_by(Tag.slug_name.asc()).all()
        return mask_recommend(tags, tag_required)

    @staticmethod
    @db_errors("failed to get tags by names")
    def get_tag_list_by_names(names, tag_required):
        """Tags whose slug name is in names, any status"""
        tags = Tag.query.filter(Tag.slug_name.in_(names)).order_by(*LIST_ORDER).all()
        return mask_recommend(tags, tag_required)

    @staticmethod
    @db_errors("failed to remove tag")
    def remove_tag(tag_id):
        """Soft delete: the row stays with status deleted"""
        db.session.execute(
            update(Tag).where(Tag.id == tag_id).values(status=TAG_STATUS_DELETED, updated_at=now_utc())
        )
        db.session.commit()

    @staticmethod
    @db_errors("failed to update tag")
    def update_tag(tag):
        """Write every column of tag to the row with the same id"""
        values = {k: v for k, v in to_dict(tag).items() if k not in IMMUTABLE_COLUMNS and v is not None}
        values["updated_at"] = now_utc()
        db.session.execute(update(Tag).where(Tag.id == tag.id).values(**values))
        db.session.commit()

    @staticmethod
    @db_errors("failed to update tag question count")
    def update_tag_question_count(tag_id, question_count):
        db.session.execute(
            update(Tag).where(Tag.id == tag_id).values(question_count=question_count, updated_at=now_utc())
        )
        db.session.commit()

    @staticmethod
    @db_errors("failed to update tag synonyms")
    def update_tag_synonym(tag_slug_names, main_tag_id, main_tag_slug_name):
        """Point every listed tag at a main tag; main_tag_id 0 detaches them"""
        db.session.execute(
            update(Tag)
            .where(Tag.slug_name.in_(tag_slug_names))
            .values(main_tag_id=main_tag_id, main_tag_slug_name=main_tag_slug_name, updated_at=now_utc())
        )
        db.session.commit()

    @staticmethod
    @db_errors("failed to update tags attribute")
    def update_tags_attribute(tag_slug_names, attribute, value):
        """Set recommend or reserved on the listed tags; other attributes are ignored"""
        if attribute not in (TAG_ATTRIBUTE_RECOMMEND, TAG_ATTRIBUTE_RESERVED):
            return
        db.session.execute(
            update(Tag).where(Tag.slug_name.in_(tag_slug_names)).values({attribute: bool(value)})
        )
        db.session.commit()

    @staticmethod
    @db_errors("failed to get tag list")
    def get_tag_list(tag_filter, tag_required):
        """Available tags matching the non-zero fields of tag_filter"""
        tags = Tag.query.filter(Tag.status == TAG_STATUS_AVAILABLE, *filter_conditions(tag_filter)).all()
        return mask_recommend(tags, tag_required)

    @staticmethod
    @db_errors("failed to get tag page")
    def get_tag_page(page, page_size, tag_filter, query_cond, tag_required):
        """
        One page of main (non-synonym) available tags.

        A slug name on the filter matches slug or display name as a substring
        instead of by equality. Returns (tags, total).
        """
        query = Tag.query
        slug_name = getattr(tag_filter, "slug_name", None) if tag_filter is not None else None
        if slug_name:
            query = query.filter(
                or_(
                    Tag.slug_name.contains(slug_name, autoescape=True),
                    Tag.display_name.contains(slug_name, autoescape=True),
                )
            )
        query = query.filter(
            Tag.status == TAG_STATUS_AVAILABLE,
            Tag.main_tag_id == 0,
            *filter_conditions(tag_filter, exclude=("slug_name",)),
        )

        if query_cond == TAG_QUERY_POPULAR:
            query = query.order_by(Tag.question_count.desc())
        elif query_cond == TAG_QUERY_NAME:
            query = query.order_by(Tag.slug_name.asc())
        elif query_cond == TAG_QUERY_NEWEST:
            query = query.order_by(Tag.created_at.desc())

        result = query.paginate(page=page, per_page=page_size, error_out=False)
        return mask_recommend(result.items, tag_required), result.total
