"""API routes for expandkit."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..templates import MacroParser, TemplateExpander
from ..text import FormatError, NewLineMode, normalize_new_line, reindent_block

logger = logging.getLogger(__name__)

router = APIRouter()


class TemplateParseRequest(BaseModel):
    """Request to list macros in a template."""

    template: str


class TemplateExpandRequest(BaseModel):
    """Request to expand a template."""

    template: str
    values: dict[str, Optional[str]] = Field(default_factory=dict)


class NormalizeRequest(BaseModel):
    """Request to normalize new lines around a text."""

    text: str
    head: NewLineMode = NewLineMode.PRESERVE
    tail: NewLineMode = NewLineMode.PRESERVE


class ReindentRequest(BaseModel):
    """Request to reindent a text block."""

    text: str
    indent: str = ""
    strict: bool = False


@router.get("/health")
async def health_check():
    """Health check endpoint with non-secret configuration."""
    from ..config import settings

    return {
        "status": "ok",
        "service": "expandkit",
        "config": {
            "settings_file_name": settings.settings_file_name,
            "settings_section": settings.settings_section,
            "release_notes_file_name": settings.release_notes_file_name,
            "ignore_case": settings.ignore_case,
        },
    }


@router.post("/templates/parse")
async def parse_template(request: TemplateParseRequest):
    """
    Parse a template and list its macros.

    Returns:
    - Macros with their positions, in order of appearance
    - Unique macro names
    """
    parser = MacroParser()
    macros = parser.extract_macros(request.template)

    return {
        "macros": [m.model_dump() for m in macros],
        "names": parser.find_names(request.template),
    }


@router.post("/templates/expand")
async def expand_template(request: TemplateExpandRequest):
    """
    Expand a template using given values.

    Unknown macros are left in place and reported as unresolved.
    """
    expander = TemplateExpander(request.values)
    result = expander.expand_with_report(request.template)

    return {
        "expanded": result.expanded,
        "resolved": result.resolved,
        "unresolved": result.unresolved,
        "complete": result.complete,
    }


@router.post("/text/normalize")
async def normalize_text_endpoint(request: NormalizeRequest):
    """Trim blank lines around a text and reinsert new lines as requested."""
    try:
        text = normalize_new_line(request.text, request.head, request.tail)
    except FormatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"text": text}


@router.post("/text/reindent")
async def reindent_text(request: ReindentRequest):
    """Replace the common indentation of a text block with given indent."""
    try:
        text = reindent_block(request.indent, request.text, request.strict)
    except FormatError as e:
        logger.warning(f"Cannot reindent text: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {"text": text}
