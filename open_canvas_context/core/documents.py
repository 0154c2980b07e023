"""
Conversion of uploaded context documents into provider message content.
"""
import asyncio
import base64
import io
import logging
import re
from typing import Any, Dict, List, Optional, Sequence
from langchain_core.runnables import RunnableConfig
from pydantic import BaseModel
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from open_canvas_context.core.exceptions import UnsupportedDocumentTypeError
from open_canvas_context.core.model_config import ModelProvider, get_model_config
from open_canvas_context.core.settings import ProviderSettings

logger = logging.getLogger(__name__)

CONTEXT_DOCUMENTS_INSTRUCTION = (
    "Use the file(s) and/or text below as context when generating your response."
)

_DATA_URL_PREFIX = re.compile(r"^data:[^;,]*;base64,")


class ContextDocument(BaseModel):
    """A user-uploaded file. ``data`` is base64 encoded."""
    type: str
    data: str
    name: Optional[str] = None
    size: Optional[int] = None

    @property
    def is_pdf(self) -> bool:
        return "pdf" in self.type

    @property
    def is_text(self) -> bool:
        return self.type.startswith("text/")


def clean_base64(data: str) -> str:
    """Strip a ``data:<mime>;base64,`` prefix and surrounding whitespace."""
    return _DATA_URL_PREFIX.sub("", data.strip())


def decode_text_document(data: str) -> str:
    """Decode a base64 text document as UTF-8."""
    return base64.b64decode(clean_base64(data)).decode("utf-8", errors="replace")


def convert_pdf_to_text(base64_pdf: str) -> str:
    """Extract the text of a base64 encoded PDF, one page per line block."""
    try:
        pdf_bytes = base64.b64decode(clean_base64(base64_pdf))
        reader = PdfReader(io.BytesIO(pdf_bytes))
        return "\n".join(page.extract_text() or "" for page in reader.pages)
    except (ValueError, OSError, PdfReadError) as e:
        logger.error("Error converting PDF to text: %s", e)
        raise


def _load_documents(
    config: RunnableConfig,
    documents: Optional[Sequence[Any]],
) -> List[ContextDocument]:
    if documents is None:
        configurable = config.get("configurable", {}) if config else {}
        documents = configurable.get("documents") or []
    return [ContextDocument.model_validate(doc) for doc in documents]


async def _document_text(doc: ContextDocument) -> str:
    if doc.is_pdf:
        return await asyncio.to_thread(convert_pdf_to_text, doc.data)
    if doc.is_text:
        return decode_text_document(doc.data)
    return ""


async def create_context_document_messages_openai(
    config: RunnableConfig,
    documents: Optional[Sequence[Any]] = None,
) -> List[Dict[str, Any]]:
    """Every document becomes a text block; unsupported types give empty text."""
    docs = _load_documents(config, documents)
    texts = await asyncio.gather(*(_document_text(doc) for doc in docs))
    return [{"type": "text", "text": text} for text in texts]


async def create_context_document_messages_anthropic(
    config: RunnableConfig,
    documents: Optional[Sequence[Any]] = None,
    native_support: bool = False,
) -> List[Dict[str, Any]]:
    """Like the OpenAI variant, but PDFs are sent as native document blocks
    when the model supports them."""
    docs = _load_documents(config, documents)

    async def convert(doc: ContextDocument) -> Dict[str, Any]:
        if doc.is_pdf and native_support:
            return {
                "type": "document",
                "source": {
                    "type": "base64",
                    "media_type": doc.type,
                    "data": doc.data,
                },
            }
        return {"type": "text", "text": await _document_text(doc)}

    return list(await asyncio.gather(*(convert(doc) for doc in docs)))


def create_context_document_messages_gemini(
    config: RunnableConfig,
    documents: Optional[Sequence[Any]] = None,
) -> List[Dict[str, Any]]:
    """PDFs pass through untouched; text is decoded.

    Raises:
        UnsupportedDocumentTypeError: For anything that is neither PDF nor text.
    """
    messages = []
    for doc in _load_documents(config, documents):
        if doc.is_pdf:
            messages.append({"mime_type": doc.type, "data": doc.data})
        elif doc.is_text:
            messages.append({"type": "text", "text": decode_text_document(doc.data)})
        else:
            raise UnsupportedDocumentTypeError(doc.type)
    return messages


async def create_context_document_messages(
    config: RunnableConfig,
    documents: Optional[Sequence[Any]] = None,
    settings: Optional[ProviderSettings] = None,
) -> List[Dict[str, Any]]:
    """Wrap the context documents into a single user message for the configured model.

    Returns an empty list when there are no documents or the provider has no
    document support.
    """
    if documents is None:
        configurable = config.get("configurable", {}) if config else {}
        documents = configurable.get("documents") or []
    if not documents:
        return []

    model_config = get_model_config(config, settings)
    model_provider = model_config["modelProvider"]
    model_name = model_config["modelName"]

    context_document_messages: List[Dict[str, Any]] = []
    if model_provider == ModelProvider.OPENAI.value:
        context_document_messages = await create_context_document_messages_openai(
            config, documents
        )
    elif model_provider == ModelProvider.ANTHROPIC.value:
        context_document_messages = await create_context_document_messages_anthropic(
            config, documents, native_support="3-5-sonnet" in model_name
        )
    elif model_provider == ModelProvider.GOOGLE_GENAI.value:
        context_document_messages = create_context_document_messages_gemini(config, documents)

    if not context_document_messages:
        return []

    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": CONTEXT_DOCUMENTS_INSTRUCTION},
                *context_document_messages,
            ],
        }
    ]
