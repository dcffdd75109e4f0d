import os

APP_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.environ.get('ANSWER_CONFIG_DIR', os.path.join(APP_DIR, 'config'))
DB_FILE = os.path.join(CONFIG_DIR, 'answer.db')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'settings.yaml')

ANSWER_DB = os.environ.get('DATABASE_URL') or 'sqlite:///' + DB_FILE

BUILD_VERSION = '20261018_0900'

DEFAULT_SETTINGS = {
    "write": {
        "required_tag": False,
    },
}

# Object types, encoded in every generated identifier
OBJECT_TYPE_QUESTION = 'question'
OBJECT_TYPE_ANSWER = 'answer'
OBJECT_TYPE_TAG = 'tag'
OBJECT_TYPE_USER = 'user'
OBJECT_TYPE_COMMENT = 'comment'
OBJECT_TYPE_REPORT = 'report'

OBJECT_TYPE_CODES = {
    OBJECT_TYPE_QUESTION: 1,
    OBJECT_TYPE_ANSWER: 2,
    OBJECT_TYPE_TAG: 3,
    OBJECT_TYPE_USER: 4,
    OBJECT_TYPE_COMMENT: 5,
    OBJECT_TYPE_REPORT: 6,
}
OBJECT_TYPE_NAMES = {code: name for name, code in OBJECT_TYPE_CODES.items()}

# Tag status
TAG_STATUS_AVAILABLE = 1
TAG_STATUS_DELETED = 10

# User status
USER_STATUS_AVAILABLE = 1
USER_STATUS_DELETED = 10

# Comment status
COMMENT_STATUS_AVAILABLE = 1
COMMENT_STATUS_DELETED = 10

# Activity cancelled flag
ACTIVITY_AVAILABLE = 0
ACTIVITY_CANCELLED = 1

# Tag attributes that can be toggled in bulk
TAG_ATTRIBUTE_RECOMMEND = 'recommend'
TAG_ATTRIBUTE_RESERVED = 'reserved'

# Tag page ordering
TAG_QUERY_POPULAR = 'popular'
TAG_QUERY_NAME = 'name'
TAG_QUERY_NEWEST = 'newest'
