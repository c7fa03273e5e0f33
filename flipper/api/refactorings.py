"""
Refactoring REST API endpoints.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from flipper.models.api_response import LanguageInfo, RefactorRequest, RefactorResponse
from flipper.services.refactoring_service import (
    RefactoringService,
    SourceTooLargeError,
    UnsupportedLanguageError,
    get_refactoring_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/refactorings", tags=["refactorings"])


@router.post("", response_model=RefactorResponse)
async def propose_refactorings(
    request: RefactorRequest,
    service: RefactoringService = Depends(get_refactoring_service)
) -> RefactorResponse:
    """
    Propose conditional refactorings at a cursor position.

    Args:
        request: Buffer content, cursor position and language hint

    Returns:
        Language used and the proposed edits; ``edits`` is empty when
        nothing applies at the cursor

    Raises:
        HTTPException: 400 for an unsupported language, 413 for an
            oversized buffer, 500 for unexpected failures
    """
    try:
        plugin = service.select_plugin(request.language, request.file_path)
        edits = service.propose(
            request.content,
            request.line,
            request.column,
            language=plugin.language_name
        )
        return RefactorResponse(language=plugin.language_name, edits=edits)

    except UnsupportedLanguageError as e:
        logger.warning(f"Unsupported language: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except SourceTooLargeError as e:
        logger.warning(f"Source too large: {e}")
        raise HTTPException(status_code=413, detail=str(e))
    except Exception as e:
        logger.error(f"Error proposing refactorings: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/languages", response_model=List[LanguageInfo])
async def list_languages(
    service: RefactoringService = Depends(get_refactoring_service)
) -> List[LanguageInfo]:
    """List the languages refactorings are available for."""
    manager = service.plugin_manager
    return [
        LanguageInfo(name=name, file_extensions=manager.get_plugin(name).file_extensions)
        for name in manager.list_supported_languages()
    ]
