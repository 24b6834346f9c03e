"""
Mind Map: AI Client
===================
Single-attempt wrapper around the configured LLM provider (Gemini or Groq) for:
  1. Mind map generation from a topic prompt
  2. Mind map generation from an uploaded document
  3. Node detail expansion

Every failure (no credential, transport error, no JSON, invalid JSON, schema
or tree violation) raises AIClientError. Callers decide what to fall back to.
"""

import json
import asyncio
import logging
from typing import Any, Dict, Optional

import google.generativeai as genai
from groq import AsyncGroq
from pydantic import ValidationError

from mindmap_ai.core.config import settings
from mindmap_ai.schemas.mindmap import ChartType, MindMapResponse
from mindmap_ai.schemas.node_details import NodeDetailsResponse

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "...(content continues)"


class AIClientError(RuntimeError):
    """The model could not produce a usable answer."""


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CLIENT INITIALIZATION
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

logger.info(f"[AI] Provider: {settings.AI_PROVIDER}")

groq_client: Optional[AsyncGroq] = None
if settings.AI_PROVIDER == "groq":
    if settings.GROQ_API_KEY:
        groq_client = AsyncGroq(api_key=settings.GROQ_API_KEY)
        logger.info("[AI] ✓ Groq client ready")
    else:
        logger.warning("[AI] ✗ Groq API key missing, running in fallback mode")

gemini_ready = False
if settings.AI_PROVIDER == "gemini":
    if settings.GOOGLE_API_KEY:
        genai.configure(api_key=settings.GOOGLE_API_KEY, transport="rest")
        gemini_ready = True
        logger.info("[AI] ✓ Gemini client ready")
    else:
        logger.warning("[AI] ✗ Google API key missing, running in fallback mode")


def provider_name() -> str:
    return settings.AI_PROVIDER


def is_configured() -> bool:
    """True when the selected provider has a credential. No network round trip."""
    if settings.AI_PROVIDER == "groq":
        return groq_client is not None
    return gemini_ready


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# PROMPTS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_JSON_ONLY = "Respond with ONE valid JSON object only: no markdown fences, no commentary.\n\n"

_MINDMAP_SHAPE = (
    "{{\n"
    '  "title": "{title_hint}",\n'
    '  "chartType": "{chart_type}",\n'
    '  "nodes": [\n'
    '    {{"id": "1", "text": "{root_hint}", "level": 0, '
    '"description": "Detailed description of the central topic"}},\n'
    '    {{"id": "2", "text": "Main branch (level 1)", "level": 1, "parentId": "1", '
    '"description": "Detailed description with examples and context"}},\n'
    '    {{"id": "3", "text": "Sub-branch (level 2)", "level": 2, "parentId": "2", '
    '"description": "Specific details"}}\n'
    "  ]\n"
    "}}\n"
)

_NODE_DETAILS_SHAPE = (
    "{\n"
    '  "summary": "A comprehensive 3-4 sentence summary explaining this topic in detail",\n'
    '  "keyPoints": ["7-10 detailed key points about this topic"],\n'
    '  "detailedInfo": {\n'
    '    "definition": "Clear, comprehensive definition with technical details",\n'
    '    "applications": ["5-7 specific real-world applications with examples"],\n'
    '    "benefits": ["5-7 detailed benefits with explanations"],\n'
    '    "challenges": ["4-6 specific challenges with solutions"],\n'
    '    "examples": ["5-7 concrete examples"],\n'
    '    "relatedConcepts": ["5-7 related concepts with brief explanations"]\n'
    "  },\n"
    '  "learningPath": {\n'
    '    "prerequisites": ["3-5 specific prerequisites"],\n'
    '    "nextSteps": ["5-7 next steps for deeper learning"],\n'
    '    "timeEstimate": "Realistic time estimate with breakdown",\n'
    '    "difficulty": "Beginner, Intermediate, or Advanced",\n'
    '    "resources": ["3-5 recommended learning resources"]\n'
    "  },\n"
    '  "practicalInfo": {\n'
    '    "howToImplement": ["4-6 practical implementation steps"],\n'
    '    "commonMistakes": ["3-5 common mistakes to avoid"],\n'
    '    "bestPractices": ["4-6 industry best practices"],\n'
    '    "tools": ["3-5 relevant tools or technologies"]\n'
    "  }\n"
    "}\n"
)


def truncate(text: str, limit: int) -> str:
    """Cut text to `limit` characters, appending a marker when anything was dropped."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def build_prompt_mindmap_prompt(prompt: str, chart_type: ChartType) -> str:
    shape = _MINDMAP_SHAPE.format(
        title_hint="Comprehensive title for the mind map",
        chart_type=chart_type.value,
        root_hint="Central topic (level 0)",
    )
    return (
        f'Create a comprehensive and detailed mind map for the topic: "{prompt}"\n'
        f"Chart Type: {chart_type.value}\n\n"
        f"{_JSON_ONLY}"
        f"JSON format:\n{shape}\n"
        "Requirements:\n"
        f"- A {chart_type.value} structure with exactly 1 central node (level 0, no parentId)\n"
        "- 6-8 main branches (level 1), each with 2-3 sub-branches (level 2)\n"
        "- Every node except the root has a parentId pointing at an existing node id\n"
        "- Unique string ids\n"
        "- Educational descriptions of 50-100 words with specific examples\n"
        "- 15-25 nodes in total\n"
    )


def build_file_mindmap_prompt(content: str, file_name: str, chart_type: ChartType) -> str:
    document = truncate(content, settings.MAX_DOCUMENT_CHARS)
    shape = _MINDMAP_SHAPE.format(
        title_hint="Mind map title based on document analysis",
        chart_type=chart_type.value,
        root_hint="Main topic from document (level 0)",
    )
    return (
        "Analyze the following document and create a comprehensive mind map.\n\n"
        f"File Name: {file_name}\n"
        f"Chart Type: {chart_type.value}\n"
        f"Document Content:\n{document}\n\n"
        f"{_JSON_ONLY}"
        f"JSON format:\n{shape}\n"
        "Requirements:\n"
        "- Extract key concepts, main ideas, and important details from the document\n"
        "- Exactly 1 central node (level 0, no parentId) representing the main topic\n"
        "- 6-10 main branches for key sections/concepts, with sub-branches for details\n"
        "- Every node except the root has a parentId pointing at an existing node id\n"
        "- Descriptions must be based on the actual document content\n"
        "- 15-30 nodes in total\n"
    )


def build_node_details_prompt(
    node_text: str,
    parent_context: Optional[str] = None,
    document_context: Optional[str] = None,
) -> str:
    context = f' in the context of "{parent_context}"' if parent_context else ""
    doc = ""
    if document_context:
        doc = (
            "Based on the document context:\n"
            f"{truncate(document_context, settings.MAX_CONTEXT_CHARS)}\n"
        )
    return (
        f'Generate comprehensive, detailed information about "{node_text}"{context}.\n'
        f"{doc}\n"
        f"{_JSON_ONLY}"
        f"JSON format:\n{_NODE_DETAILS_SHAPE}\n"
        "Requirements:\n"
        "- In-depth, educational content with real-world applications\n"
        "- Accurate, up-to-date, actionable information\n"
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# JSON RECOVERY
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _balanced_end(text: str, start: int) -> int:
    """Index just past the brace closing the one at `start`, or -1."""
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


def extract_json(raw_text: str) -> Dict[str, Any]:
    """
    Return the first balanced {...} span of a free-text model answer that
    parses as a JSON object. Braces inside string literals are ignored.
    Raises AIClientError when no such span exists.
    """
    if not raw_text or not raw_text.strip():
        raise AIClientError("Empty AI response received")

    start = raw_text.find("{")
    while start != -1:
        end = _balanced_end(raw_text, start)
        if end != -1:
            try:
                parsed = json.loads(raw_text[start:end])
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, dict):
                return parsed
        start = raw_text.find("{", start + 1)

    logger.warning(f"[AI] No JSON object in response (first 300 chars): {raw_text[:300]!r}")
    raise AIClientError("AI response contained no valid JSON object")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# PROVIDER CALLS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

async def _call_groq(prompt: str) -> str:
    """Call Groq (Llama 3) in JSON mode."""
    logger.info(f"[AI] Calling Groq ({settings.GROQ_MODEL})...")
    completion = await groq_client.chat.completions.create(
        model=settings.GROQ_MODEL,
        messages=[
            {"role": "system", "content": "You are an expert educator who structures knowledge as JSON."},
            {"role": "user", "content": prompt},
        ],
        response_format={"type": "json_object"},
        temperature=settings.AI_TEMPERATURE,
        max_tokens=settings.AI_MAX_TOKENS,
    )
    return completion.choices[0].message.content or ""


async def _call_gemini(prompt: str) -> str:
    """Call Gemini in JSON mode. The SDK is blocking, so it runs in a thread."""
    logger.info(f"[AI] Calling Gemini ({settings.GEMINI_MODEL})...")
    model = genai.GenerativeModel(
        model_name=settings.GEMINI_MODEL,
        generation_config={
            "response_mime_type": "application/json",
            "temperature": settings.AI_TEMPERATURE,
            "max_output_tokens": settings.AI_MAX_TOKENS,
        },
    )
    response = await asyncio.to_thread(model.generate_content, prompt)
    return response.text


async def _call_model(prompt: str) -> str:
    if settings.AI_PROVIDER == "groq":
        return await _call_groq(prompt)
    return await _call_gemini(prompt)


async def generate_json(prompt: str) -> Dict[str, Any]:
    """One model round trip: prompt in, parsed JSON object out."""
    if not is_configured():
        raise AIClientError(f"{provider_name()} is not configured")

    try:
        raw = await _call_model(prompt)
    except Exception as e:
        raise AIClientError(f"{provider_name()} call failed: {e}") from e

    logger.info(f"[AI] ✓ {provider_name()} call succeeded")
    return extract_json(raw)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# GENERATION
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _to_mind_map(parsed: Dict[str, Any], chart_type: ChartType) -> MindMapResponse:
    # The requested chart type wins over whatever the model echoed back
    parsed["chartType"] = chart_type.value
    try:
        return MindMapResponse.model_validate(parsed)
    except ValidationError as e:
        raise AIClientError(f"AI mind map failed validation: {e}") from e


async def generate_mind_map(prompt: str, chart_type: ChartType = ChartType.hierarchical) -> MindMapResponse:
    if not prompt or not prompt.strip():
        raise AIClientError("Prompt is empty")

    logger.info(f"[MINDMAP] Generating for prompt {prompt[:80]!r} ({chart_type.value})")
    parsed = await generate_json(build_prompt_mindmap_prompt(prompt, chart_type))
    mind_map = _to_mind_map(parsed, chart_type)
    logger.info(f"[MINDMAP] ✓ {len(mind_map.nodes)} nodes")
    return mind_map


async def generate_file_mind_map(
    content: str,
    file_name: str,
    chart_type: ChartType = ChartType.hierarchical,
) -> MindMapResponse:
    if not content or not content.strip():
        raise AIClientError(f"Document {file_name!r} has no text")

    logger.info(f"[MINDMAP] Generating from file {file_name!r} ({len(content)} chars)")
    parsed = await generate_json(build_file_mindmap_prompt(content, file_name, chart_type))
    mind_map = _to_mind_map(parsed, chart_type)
    logger.info(f"[MINDMAP] ✓ {len(mind_map.nodes)} nodes from {file_name!r}")
    return mind_map


async def generate_node_details(
    node_text: str,
    parent_context: Optional[str] = None,
    document_context: Optional[str] = None,
) -> NodeDetailsResponse:
    if not node_text or not node_text.strip():
        raise AIClientError("Node text is empty")

    logger.info(f"[DETAILS] Generating for node {node_text!r}")
    parsed = await generate_json(
        build_node_details_prompt(node_text, parent_context, document_context)
    )
    try:
        return NodeDetailsResponse.model_validate(parsed)
    except ValidationError as e:
        raise AIClientError(f"AI node details failed validation: {e}") from e
