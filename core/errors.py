# core/errors.py

from fastapi import HTTPException, status

from core.logging_config import logger


def extract_supabase_error(error: Exception) -> str:
    """
    Pull a readable message out of a supabase-py error.
    PostgREST APIError and GoTrue AuthApiError both carry ``message``;
    everything else falls back to args / str().
    """
    message = getattr(error, "message", None)
    if message:
        return str(message)

    if getattr(error, "args", None):
        return str(error.args[0])

    return str(error) or type(error).__name__


def handle_supabase_error(error: Exception, operation: str = "Database operation", status_code: int = 500) -> HTTPException:
    """
    Translate a database failure into an HTTPException.
    Returns (doesn't raise) so the caller decides: ``raise handle_supabase_error(e, "...")``.

    Args:
        error: The exception raised by the Supabase client
        operation: Label shown to the client, e.g. "Failed to create report"
        status_code: Fallback status when the message is not recognised
    """
    error_detail = extract_supabase_error(error)
    logger.error(f"{operation}: {error_detail}")

    error_lower = error_detail.lower()
    if "duplicate" in error_lower or "unique" in error_lower:
        return HTTPException(status_code=400, detail=f"{operation}: Record already exists")
    if "foreign key" in error_lower:
        return HTTPException(status_code=400, detail=f"{operation}: Invalid reference")
    if "not found" in error_lower or "does not exist" in error_lower:
        return HTTPException(status_code=404, detail=f"{operation}: Resource not found")
    return HTTPException(status_code=status_code, detail=f"{operation} failed")


def forbidden_page(page: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=f"Insufficient permissions: '{page}' required",
    )


def not_found(entity: str, entity_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{entity} '{entity_id}' not found")
