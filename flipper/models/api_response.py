"""API request/response data models."""

from typing import List, Optional

from pydantic import BaseModel, Field

from flipper.models.edit import ProposedEdit


class RefactorRequest(BaseModel):
    """Cursor position in a buffer for which refactorings are requested."""

    content: str = Field(..., description="Full text of the buffer")
    line: int = Field(..., ge=0, description="Cursor line (0-indexed)")
    column: int = Field(..., ge=0, description="Cursor column (0-indexed)")
    language: Optional[str] = Field(None, description="Language name, e.g. 'typescript'")
    file_path: Optional[str] = Field(None, description="File path used to pick a language by extension")


class RefactorResponse(BaseModel):
    """Refactorings available at the cursor."""

    language: str
    edits: List[ProposedEdit] = []


class LanguageInfo(BaseModel):
    """A supported language and its file extensions."""

    name: str
    file_extensions: List[str]
