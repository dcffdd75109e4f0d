"""
API response helpers - JSON envelope shared by the timeline and tag endpoints
"""

from flask import jsonify
from functools import wraps
import logging

from exceptions import DatabaseException, NotFoundException, ValidationException

logger = logging.getLogger(__name__)


class ErrorCode:
    SUCCESS = "SUCCESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def success_response(data, status_code=200):
    return jsonify({"code": ErrorCode.SUCCESS, "success": True, "data": data}), status_code


def error_response(error_code, message, status_code):
    """
    Failure envelope; server side failures are logged before answering
    """
    if error_code in (ErrorCode.INTERNAL_ERROR, ErrorCode.DATABASE_ERROR):
        logger.error(f"{error_code}: {message}")
    return jsonify({"code": error_code, "success": False, "message": message}), status_code


def handle_api_errors(f):
    """
    Map domain exceptions raised by an endpoint to error envelopes
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValidationException as e:
            return error_response(ErrorCode.VALIDATION_ERROR, e.message, 400)
        except NotFoundException as e:
            return error_response(ErrorCode.NOT_FOUND, e.message, 404)
        except DatabaseException as e:
            return error_response(ErrorCode.DATABASE_ERROR, e.message, 500)
        except ValueError as e:
            return error_response(ErrorCode.VALIDATION_ERROR, str(e), 400)
        except KeyError as e:
            return error_response(ErrorCode.VALIDATION_ERROR, f"Missing required parameter: {e}", 400)
        except Exception as e:
            logger.error(f"Unhandled exception in {f.__name__}: {e}", exc_info=True)
            return error_response(ErrorCode.INTERNAL_ERROR, "An unexpected error occurred", 500)

    return wrapper


def paginated_response(items, total, page, per_page):
    """Page of items plus the counters a pager needs"""
    has_more = page * per_page < total
    pagination = {
        "total": total,
        "page": page,
        "per_page": per_page,
        "total_pages": (total + per_page - 1) // per_page,
        "has_more": has_more,
        "next_page": page + 1 if has_more else None,
        "prev_page": page - 1 if page > 1 else None,
    }
    return jsonify({"code": ErrorCode.SUCCESS, "success": True, "data": items, "pagination": pagination}), 200


def not_found_response(resource_type, resource_id=None):
    if resource_id:
        message = f"{resource_type} with ID '{resource_id}' not found"
    else:
        message = f"{resource_type} not found"
    return error_response(ErrorCode.NOT_FOUND, message, 404)
