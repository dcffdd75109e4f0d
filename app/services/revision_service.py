"""
Decoding of stored revision content.

A revision's content is the JSON snapshot of a question (with its tags), an
answer or a tag. Each snapshot kind knows how to read its own payload and how
to present itself in a timeline detail.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
import json
from typing import Dict, List, Optional, Type

from constants import OBJECT_TYPE_QUESTION, OBJECT_TYPE_ANSWER, OBJECT_TYPE_TAG


@dataclass
class ObjectTimelineDetail:
    title: str = ""
    original_text: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self):
        return asdict(self)


def _load_object(content) -> dict:
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError(f"revision content is a {type(data).__name__}, expected an object")
    return data


def _string(data, key) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"revision field {key!r} is not a string")
    return value


class RevisionContent:
    """Base of the revision snapshot kinds"""

    object_type: str = ""

    @classmethod
    def decode(cls, content):
        raise NotImplementedError

    def to_detail(self, object_title) -> ObjectTimelineDetail:
        raise NotImplementedError


@dataclass
class QuestionRevision(RevisionContent):
    object_type = OBJECT_TYPE_QUESTION

    title: str = ""
    original_text: str = ""
    tags: List[str] = field(default_factory=list)

    @classmethod
    def decode(cls, content):
        data = _load_object(content)
        raw_tags = data.get("tags") or []
        if not isinstance(raw_tags, list):
            raise ValueError("revision field 'tags' is not a list")
        tags = []
        for tag in raw_tags:
            if not isinstance(tag, dict):
                raise ValueError("revision tag is not an object")
            tags.append(_string(tag, "slug_name"))
        return cls(title=_string(data, "title"), original_text=_string(data, "original_text"), tags=tags)

    def to_detail(self, object_title):
        return ObjectTimelineDetail(title=self.title, original_text=self.original_text, tags=list(self.tags))


@dataclass
class AnswerRevision(RevisionContent):
    object_type = OBJECT_TYPE_ANSWER

    original_text: str = ""

    @classmethod
    def decode(cls, content):
        data = _load_object(content)
        return cls(original_text=_string(data, "original_text"))

    def to_detail(self, object_title):
        # answers are titled by their question
        return ObjectTimelineDetail(title=object_title, original_text=self.original_text)


@dataclass
class TagRevision(RevisionContent):
    object_type = OBJECT_TYPE_TAG

    slug_name: str = ""
    original_text: str = ""

    @classmethod
    def decode(cls, content):
        data = _load_object(content)
        return cls(slug_name=_string(data, "slug_name"), original_text=_string(data, "original_text"))

    def to_detail(self, object_title):
        return ObjectTimelineDetail(title=self.slug_name, original_text=self.original_text)


REVISION_TYPES: Dict[str, Type[RevisionContent]] = {
    kind.object_type: kind for kind in (QuestionRevision, AnswerRevision, TagRevision)
}


def get_revision_type(object_type) -> Optional[Type[RevisionContent]]:
    return REVISION_TYPES.get(object_type)


def decode_revision(object_type, content) -> RevisionContent:
    """
    Decode content for an object type.

    Raises KeyError for object types without revisions and ValueError when
    the payload does not match the snapshot shape.
    """
    kind = get_revision_type(object_type)
    if kind is None:
        raise KeyError(object_type)
    return kind.decode(content)
