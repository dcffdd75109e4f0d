"""
Tests for revision content decoding
"""
import json
import pytest


class TestDecodeRevision:
    """Tests for the per-object-type snapshot kinds"""

    def test_question_revision(self):
        from services.revision_service import QuestionRevision, decode_revision

        content = json.dumps({
            'title': 'How do I read a file?',
            'original_text': 'body',
            'tags': [{'slug_name': 'python', 'display_name': 'Python'}, {'slug_name': 'io'}],
            'view_count': 10,
        })
        revision = decode_revision('question', content)
        assert isinstance(revision, QuestionRevision)
        detail = revision.to_detail('ignored')
        assert detail.to_dict() == {'title': 'How do I read a file?', 'original_text': 'body', 'tags': ['python', 'io']}

    def test_answer_revision_uses_question_title(self):
        from services.revision_service import decode_revision

        detail = decode_revision('answer', json.dumps({'original_text': 'Use with.'})).to_detail('Question title')
        assert detail.title == 'Question title'
        assert detail.original_text == 'Use with.'
        assert detail.tags == []

    def test_tag_revision(self):
        from services.revision_service import decode_revision

        detail = decode_revision('tag', json.dumps({'slug_name': 'python', 'original_text': 'About'})).to_detail('x')
        assert detail.title == 'python'
        assert detail.original_text == 'About'

    def test_missing_fields_default_to_empty(self):
        from services.revision_service import decode_revision

        detail = decode_revision('question', '{}').to_detail('')
        assert detail.to_dict() == {'title': '', 'original_text': '', 'tags': []}

    @pytest.mark.parametrize('content', ['not json', '[1, 2]', '{"title": 5}', '{"tags": "python"}', '{"tags": [1]}'])
    def test_malformed_content(self, content):
        from services.revision_service import decode_revision

        with pytest.raises(ValueError):
            decode_revision('question', content)

    def test_unknown_object_type(self):
        from services.revision_service import decode_revision

        with pytest.raises(KeyError):
            decode_revision('comment', '{}')
