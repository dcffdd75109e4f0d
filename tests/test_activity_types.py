"""
Tests for the activity type table
"""
import pytest


class TestActivityTypes:
    """Tests for code to label mapping"""

    @pytest.mark.parametrize('key', ['answer.voted_up', 'answer.voted_down', 'question.voted_up', 'answer.accepted'])
    def test_received_side_entries_are_hidden(self, key):
        from activity_types import get_activity_code, get_activity_type

        assert get_activity_type(get_activity_code(key)).hidden is True

    @pytest.mark.parametrize('key,label', [
        ('question.vote_up', 'upvote'),
        ('answer.vote_down', 'downvote'),
        ('question.edited', 'edited'),
        ('question.accept', 'accept'),
        ('tag.created', 'created'),
        ('comment.commented', 'commented'),
    ])
    def test_display_labels(self, key, label):
        from activity_types import get_activity_code, get_activity_type

        info = get_activity_type(get_activity_code(key))
        assert info.display_label == label
        assert info.hidden is False

    def test_key_is_split_into_object_and_activity(self):
        from activity_types import get_activity_code, get_activity_type

        info = get_activity_type(get_activity_code('answer.rollback'))
        assert info.object_type == 'answer'
        assert info.activity_type == 'rollback'

    def test_unknown_code(self):
        from activity_types import get_activity_type, UNKNOWN_ACTIVITY_TYPE

        info = get_activity_type(9999)
        assert info is UNKNOWN_ACTIVITY_TYPE
        assert info.hidden is False and info.object_type == ''

    def test_vote_codes(self):
        from activity_types import ACTIVITY_TYPES, vote_activity_codes

        keys = sorted(ACTIVITY_TYPES[code].key for code in vote_activity_codes())
        assert keys == ['answer.vote_down', 'answer.vote_up', 'question.vote_down', 'question.vote_up']

    def test_codes_are_unique(self):
        from activity_types import ACTIVITY_KEYS

        assert len(set(ACTIVITY_KEYS.values())) == len(ACTIVITY_KEYS)
