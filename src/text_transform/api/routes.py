"""
API Endpoints

    GET  /api/health                        service status and counts
    GET  /api/tools[?category=slug]         catalog listing
    GET  /api/transform/{category}/{tool}   tool description and example request
    POST /api/transform/{category}/{tool}   run a tool
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from text_transform import __version__
from text_transform.api.errors import ApiException
from text_transform.api.schemas import ApiResponse, TransformRequest, utc_timestamp
from text_transform.config import Settings
from text_transform.exceptions import InputTooLargeError, ToolUnavailableError
from text_transform.logging_config import get_logger
from text_transform.models import Tool
from text_transform.runner import (
    Toolkit,
    check_input_size,
    missing_required_options,
    run_tool,
)

logger = get_logger("api")
router = APIRouter(prefix="/api")

TRANSFORM_ENDPOINT = "/api/transform/{category}/{tool}"


# =============================================================================
# Dependencies
# =============================================================================

def get_toolkit(request: Request) -> Toolkit:
    return request.app.state.toolkit


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _category_slug(toolkit: Toolkit, tool: Tool) -> str:
    category = toolkit.tools.categories.get_category_by_id(tool.category_id)
    return category.slug if category else tool.category_id


def _tool_summary(toolkit: Toolkit, tool: Tool) -> Dict[str, Any]:
    category = _category_slug(toolkit, tool)
    return {
        "id": tool.id,
        "name": tool.name,
        "slug": tool.slug,
        "category": category,
        "description": tool.description,
        "endpoint": f"/api/transform/{category}/{tool.slug}",
        "is_generator": tool.is_generator,
    }


def _require_tool(toolkit: Toolkit, category: str, tool_slug: str) -> Tool:
    tool = toolkit.tools.get_tool(category, tool_slug)
    if tool is None:
        raise ApiException.not_found(f"Tool '{tool_slug}' in category '{category}'")
    return tool


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", summary="Service health")
async def health(toolkit: Toolkit = Depends(get_toolkit)) -> Dict[str, Any]:
    """Status, version and catalog counts. Not enveloped."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": utc_timestamp(),
        "stats": {
            "total_tools": toolkit.tools.total_tool_count(),
            "categories": len(toolkit.tools.list_all_categories()),
        },
        "endpoints": {
            "tools": "/api/tools",
            "transform": TRANSFORM_ENDPOINT,
            "health": "/api/health",
            "docs": "/docs",
        },
    }


@router.get("/tools", summary="List tools")
async def list_tools(
    category: Optional[str] = Query(default=None, description="Category slug"),
    toolkit: Toolkit = Depends(get_toolkit),
) -> Dict[str, Any]:
    registry = toolkit.tools

    if category:
        match = registry.categories.get_category_by_slug(category)
        if match is None:
            raise ApiException.not_found(f"Category '{category}'")
        tools = [
            dict(_tool_summary(toolkit, tool), options=[option.model_dump() for option in tool.options])
            for tool in registry.get_tools_by_category(match.id)
        ]
        return ApiResponse.ok({"category": category, "tools": tools}).model_dump()

    categories = [
        dict(category.model_dump(), endpoint=f"/api/tools?category={category.slug}")
        for category in registry.list_categories_with_counts()
    ]
    return ApiResponse.ok({
        "total_tools": registry.total_tool_count(),
        "categories": categories,
        "tools": [_tool_summary(toolkit, tool) for tool in registry.list_all_tools()],
    }).model_dump()


@router.get("/transform/{category}/{tool_slug}", summary="Describe a tool")
async def describe_tool(
    category: str,
    tool_slug: str,
    toolkit: Toolkit = Depends(get_toolkit),
) -> Dict[str, Any]:
    tool = _require_tool(toolkit, category, tool_slug)
    example: Dict[str, Any] = {"options": tool.default_options()}
    if not tool.is_generator:
        example["input"] = tool.input_placeholder or "example input"

    data = _tool_summary(toolkit, tool)
    data.update({
        "method": "POST",
        "options": [dict(option.model_dump(), required=option.required) for option in tool.options],
        "example": {"request": example},
    })
    return ApiResponse.ok(data).model_dump()


@router.post("/transform/{category}/{tool_slug}", summary="Run a tool")
async def transform(
    category: str,
    tool_slug: str,
    body: Optional[TransformRequest] = Body(default=None),
    toolkit: Toolkit = Depends(get_toolkit),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    tool = _require_tool(toolkit, category, tool_slug)
    body = body or TransformRequest()

    if body.input is None and not tool.is_generator:
        raise ApiException.validation("input", "Input text is required")

    missing = missing_required_options(tool, body.options)
    if missing:
        option = next(opt for opt in tool.options if opt.key == missing[0])
        raise ApiException.validation(option.key, f"Parameter '{option.key}' is required: {option.label}")

    text = body.input or ""
    try:
        check_input_size(text, settings.max_input_size)
    except InputTooLargeError as e:
        raise ApiException.validation("input", e.message)

    try:
        output = await run_tool(toolkit, tool, text, body.options)
    except ToolUnavailableError as e:
        logger.error("%s: %s", e.message, e.details)
        raise ApiException.unavailable(e.message, {"tool": tool.id})
    except Exception as e:
        logger.warning("Tool %s failed: %s", tool.id, e)
        raise ApiException.bad_request(
            str(e) or "Transformation failed",
            {"tool": tool.name, "category": category},
        )

    return ApiResponse.ok({
        "tool": tool.name,
        "category": category,
        "input": body.input or None,
        "output": output,
        "options": body.options or None,
    }).model_dump()
