"""
Services package

Request-level operations composed from repositories:
- activity_service.py: object timelines and revision details
- object_info_service.py: resolve an identifier to its question/answer
- etc.
"""
