"""
Repositories package

Each repository encapsulates database operations for a model:
- activity_repository.py
- tag_repository.py
- etc.

Usage:
    from repositories.tag_repository import TagRepository
    tag = TagRepository.get_tag_by_id(tag_id, tag_required=True)
"""
