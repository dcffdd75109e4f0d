"""
Tests for API endpoints
"""
import json


class TestTimelineEndpoint:
    """Tests for /api/activity/timeline"""

    def test_timeline(self, client, sample_question):
        from activity_types import get_activity_code
        from repositories.activity_repository import ActivityRepository

        qid = sample_question['question'].id
        ActivityRepository.add_activity(
            activity_type=get_activity_code('question.asked'),
            object_id=qid,
            original_object_id=qid,
            user_id=sample_question['author'].id,
        )

        response = client.get(f'/api/activity/timeline?object_id={qid}')
        data = json.loads(response.data)

        assert response.status_code == 200
        assert data['code'] == 'SUCCESS'
        assert data['data']['object_info']['title'] == 'How do I read a file?'
        assert data['data']['timeline'][0]['activity_type'] == 'asked'
        assert data['data']['timeline'][0]['username'] == 'alice'

    def test_timeline_requires_object_id(self, client):
        response = client.get('/api/activity/timeline')
        data = json.loads(response.data)

        assert response.status_code == 400
        assert data['code'] == 'VALIDATION_ERROR'

    def test_timeline_unknown_object(self, client):
        response = client.get('/api/activity/timeline?object_id=10010000000009999')

        assert response.status_code == 404
        assert response.get_json()['code'] == 'NOT_FOUND'


class TestTimelineDetailEndpoint:
    """Tests for /api/activity/timeline/detail"""

    def test_detail(self, client, sample_question):
        from repositories.revision_repository import RevisionRepository

        qid = sample_question['question'].id
        old = RevisionRepository.add_revision(qid, {'title': 'Old', 'original_text': 'a'})
        new = RevisionRepository.add_revision(qid, {'title': 'New', 'original_text': 'b'})

        response = client.get(f'/api/activity/timeline/detail?old_revision_id={old.id}&new_revision_id={new.id}')
        data = response.get_json()

        assert response.status_code == 200
        assert data['data']['old_revision']['title'] == 'Old'
        assert data['data']['new_revision']['original_text'] == 'b'

    def test_detail_requires_both_ids(self, client):
        response = client.get('/api/activity/timeline/detail?old_revision_id=1')
        assert response.status_code == 400


class TestTagEndpoints:
    """Tests for tag listing endpoints"""

    def test_tag_page(self, client, make_tag, site_settings):
        make_tag('flask', question_count=3)
        make_tag('django', question_count=8)
        make_tag('flask-login', main_tag_id=1, main_tag_slug_name='flask')

        response = client.get('/api/tags/page?page=1&page_size=10&query_cond=popular')
        data = response.get_json()

        assert response.status_code == 200
        assert [t['slug_name'] for t in data['data']] == ['django', 'flask']
        assert data['pagination']['total'] == 2
        assert data['pagination']['has_more'] is False
        assert data['pagination']['next_page'] is None
        assert data['pagination']['prev_page'] is None
        assert data['pagination']['total_pages'] == 1

    def test_query_masks_recommend_when_tags_optional(self, client, make_tag, site_settings):
        make_tag('python', recommend=True)

        data = client.get('/api/tags/query').get_json()
        assert [t['slug_name'] for t in data['data']] == ['python']
        assert data['data'][0]['recommend'] is False

        site_settings(required_tag=True)
        data = client.get('/api/tags/query?tag=py').get_json()
        assert data['data'][0]['recommend'] is True

    def test_recommend_and_reserved(self, client, make_tag, site_settings):
        site_settings(required_tag=True)
        make_tag('web', recommend=True)
        make_tag('meta', reserved=True)

        recommend = client.get('/api/tags/recommend').get_json()
        reserved = client.get('/api/tags/reserved').get_json()
        assert [t['slug_name'] for t in recommend['data']] == ['web']
        assert [t['slug_name'] for t in reserved['data']] == ['meta']

    def test_get_tag(self, client, make_tag, site_settings):
        tag = make_tag('python', display_name='Python')

        by_id = client.get(f'/api/tag?id={tag.id}').get_json()
        by_slug = client.get('/api/tag?slug_name=python').get_json()
        assert by_id['data']['display_name'] == 'Python'
        assert by_slug['data']['tag_id'] == tag.id

    def test_get_tag_not_found(self, client, site_settings):
        response = client.get('/api/tag?slug_name=missing')
        assert response.status_code == 404

    def test_get_tag_requires_identifier(self, client, site_settings):
        response = client.get('/api/tag')
        assert response.status_code == 400

    def test_unknown_route(self, client):
        response = client.get('/api/nothing-here')
        assert response.status_code == 404
        assert response.get_json()['code'] == 'NOT_FOUND'
