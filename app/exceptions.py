"""
Answer - Custom Exceptions and Exception Handlers
"""
import structlog
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = structlog.get_logger('exceptions')


class AnswerException(Exception):
    """Base exception for Answer"""
    def __init__(self, message: str, code: str = "ANSWER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self):
        return {
            'error': True,
            'code': self.code,
            'message': self.message
        }


class DatabaseException(AnswerException):
    """Database-related exceptions"""
    def __init__(self, message: str):
        super().__init__(message, code="DATABASE_ERROR")
        logger.error(f"Database error: {message}")


class NotFoundException(AnswerException):
    """A referenced object, revision or comment does not exist"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, code="NOT_FOUND")
        logger.info(f"Not found: {message}")


class ValidationException(AnswerException):
    """Validation-related exceptions"""
    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")
        logger.warning(f"Validation error: {message}")


def register_exception_handlers(app):
    """Register exception handlers with Flask app"""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle HTTP exceptions"""
        return jsonify({
            'error': True,
            'code': e.name.upper().replace(' ', '_'),
            'message': e.description
        }), e.code

    @app.errorhandler(AnswerException)
    def handle_answer_exception(e):
        """Handle Answer custom exceptions"""
        return jsonify(e.to_dict()), 400

    @app.errorhandler(DatabaseException)
    def handle_database_exception(e):
        """Handle database exceptions"""
        return jsonify(e.to_dict()), 500

    @app.errorhandler(NotFoundException)
    def handle_not_found_exception(e):
        """Handle missing objects"""
        return jsonify(e.to_dict()), 404

    @app.errorhandler(ValidationException)
    def handle_validation_exception(e):
        """Handle validation exceptions"""
        return jsonify(e.to_dict()), 400

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        """Handle all other exceptions"""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify({
            'error': True,
            'code': 'INTERNAL_ERROR',
            'message': 'An unexpected error occurred'
        }), 500
