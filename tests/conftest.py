"""
Pytest fixtures and configuration for Answer tests
"""
import os
import sys
import tempfile
import pytest

# Settings are written under a throwaway directory, set before constants is imported
os.environ.setdefault('ANSWER_CONFIG_DIR', tempfile.mkdtemp(prefix='answer-test-'))

# Add app directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'app')))


@pytest.fixture(scope='session')
def app_config():
    """App configuration for tests"""
    return {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    }


@pytest.fixture
def app(app_config):
    """Application bound to a fresh in-memory database"""
    from app import create_app
    from db import db

    _app = create_app(app_config)
    with _app.app_context():
        yield _app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def site_settings(tmp_path, monkeypatch):
    """Point settings at an empty config file; returns a setter for write settings"""
    import settings

    monkeypatch.setattr(settings, 'CONFIG_FILE', str(tmp_path / 'settings.yaml'))
    settings._cached_settings = None

    def set_write(**values):
        success, errors = settings.set_write_settings(values)
        assert success, errors
        return settings.load_settings()

    yield set_write
    settings._cached_settings = None


@pytest.fixture
def make_tag(app):
    """Insert a tag row directly; id is generated like production ids"""
    from db import db
    from models.tag import Tag
    from repositories.uniqueid_repository import UniqueIDRepository

    def _make_tag(slug_name, **kwargs):
        kwargs.setdefault('display_name', slug_name)
        tag = Tag(id=UniqueIDRepository.gen_unique_id_str('tag'), slug_name=slug_name, **kwargs)
        db.session.add(tag)
        db.session.commit()
        return tag

    return _make_tag


@pytest.fixture
def make_user(app):
    from db import db
    from models.user import User
    from repositories.uniqueid_repository import UniqueIDRepository

    def _make_user(username, display_name='', **kwargs):
        user = User(
            id=UniqueIDRepository.gen_unique_id_str('user'),
            username=username,
            display_name=display_name or username.title(),
            **kwargs,
        )
        db.session.add(user)
        db.session.commit()
        return user

    return _make_user


@pytest.fixture
def sample_question(app, make_user):
    """A question with one answer and one comment on the question"""
    from db import db
    from models import Answer, Comment, Question
    from repositories.uniqueid_repository import UniqueIDRepository

    author = make_user('alice', 'Alice')
    question = Question(
        id=UniqueIDRepository.gen_unique_id_str('question'),
        user_id=author.id,
        title='How do I read a file?',
        original_text='Looking for the idiomatic way.',
        parsed_text='<p>Looking for the idiomatic way.</p>',
    )
    answer = Answer(
        id=UniqueIDRepository.gen_unique_id_str('answer'),
        question_id=question.id,
        user_id=author.id,
        original_text='Use a with block.',
        parsed_text='<p>Use a with block.</p>',
    )
    comment = Comment(
        id=UniqueIDRepository.gen_unique_id_str('comment'),
        object_id=question.id,
        user_id=author.id,
        original_text='Which version?',
        parsed_text='<p>Which version?</p>',
    )
    db.session.add_all([question, answer, comment])
    db.session.commit()
    return {'author': author, 'question': question, 'answer': answer, 'comment': comment}
