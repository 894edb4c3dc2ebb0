"""Chat service: model fallback chain and the research-aware chat turn."""

from __future__ import annotations

import re
from typing import Any, Callable, Optional

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from research_chat.config.settings import Settings
from research_chat.exceptions import ModelUnavailableError
from research_chat.llm.factory import create_chat_model
from research_chat.models.chat import AIAction, AIResponse, ChatTurn, RedirectAction
from research_chat.models.research import ResearchTitleSuggestion
from research_chat.parsing.links import extract_links
from research_chat.parsing.normalizer import strip_markdown
from research_chat.parsing.titles import ParserConfig, TitleExtractor
from research_chat.research import prompts
from research_chat.research.session import (
    ResearchSession,
    ResearchStep,
    is_exit_command,
    is_retry_command,
    is_start_command,
)

logger = structlog.get_logger(__name__)

ASSISTANT_INSTRUCTIONS = """Anda adalah AI assistant yang sangat membantu dan expert dalam berbagai bidang.

Instruksi:
- Jika diminta membuat kode, berikan kode yang lengkap, fungsional, dan siap dijalankan
- Jika diminta puisi, buatlah puisi yang indah dan bermakna
- Jika diminta membuka website, berikan response singkat
- Jika diminta informasi, berikan jawaban yang akurat dan helpful
- Selalu gunakan bahasa Indonesia yang natural

Response harus dalam format yang rapi dan mudah dibaca."""

IMAGE_REPLY = """Saya melihat Anda telah mengunggah gambar. Saat ini fitur analisis gambar sedang dalam perbaikan.

Namun saya tetap bisa membantu Anda dengan:
• Membuat kode programming
• Menjawab pertanyaan umum
• Membuat tabel dan database
• Membuka website

Silakan tanyakan hal lain yang bisa saya bantu!"""

LIMITED_MODE_REPLY = "Sistem AI sedang dalam mode terbatas. Silakan coba lagi nanti atau hubungi administrator."

SYSTEM_ERROR_REPLY = "Terjadi kesalahan sistem. Silakan coba lagi dalam beberapa saat."

POEM_REPLY = """Berikut adalah puisi untuk Anda:

**Harapan Pagi**

Mentari pagi mulai terbit,
Membawa harapan di hati,
Setiap langkah yang kita tempuh,
Adalah jalan menuju mimpi.

Semoga hari ini membawa kebahagiaan untuk Anda! 🌅"""

MOTIVATION_REPLY = """💪 **Motivasi untuk Anda:**

"Setiap hari adalah kesempatan baru untuk menjadi lebih baik. Jangan menyerah pada impian Anda!"

Tetap semangat! 🌟"""

OUTAGE_REPLY = """Maaf, saat ini AI sedang mengalami gangguan teknis. Namun saya tetap siap membantu Anda!

Silakan coba lagi atau tanyakan hal lain yang bisa saya bantu."""

REDIRECT_TRIGGERS = ("buka", "open", ".com", "http")
KNOWN_SITES = {
    "google": "https://google.com",
    "youtube": "https://youtube.com",
    "facebook": "https://facebook.com",
    "instagram": "https://instagram.com",
}
_url_like = re.compile(
    r"(https?://[^\s]+|www\.[^\s]+|[^\s]+\.(com|org|net|edu|gov|id|co\.id)[^\s]*)",
    re.IGNORECASE,
)

ModelFactory = Callable[..., BaseChatModel]


def detect_redirect(prompt: str) -> Optional[str]:
    """URL the user asked to open, if the prompt reads like such a request."""
    lowered = prompt.lower()
    if not any(trigger in lowered for trigger in REDIRECT_TRIGGERS):
        return None

    for name, url in KNOWN_SITES.items():
        if name in lowered:
            return url

    match = _url_like.search(prompt)
    if not match:
        return None
    url = match.group(0)
    if not url.startswith("http"):
        url = f"https://{url}"
    return url


def fallback_reply(prompt: str) -> str:
    """Canned reply used when every model in the chain failed."""
    lowered = prompt.lower()
    if "puisi" in lowered or "poem" in lowered:
        return POEM_REPLY
    if "motivasi" in lowered or "semangat" in lowered:
        return MOTIVATION_REPLY
    return OUTAGE_REPLY


def _content_text(content: Any) -> str:
    if isinstance(content, list):
        parts = [part.get("text", "") if isinstance(part, dict) else str(part) for part in content]
        return "".join(parts).strip()
    return str(content or "").strip()


class ChatService:
    """Answer prompts through the configured model chain."""

    def __init__(
        self,
        settings: Settings,
        parser_config: Optional[ParserConfig] = None,
        model_factory: ModelFactory = create_chat_model,
    ) -> None:
        self.settings = settings
        self.extractor = TitleExtractor(parser_config or ParserConfig.from_settings(settings))
        self._model_factory = model_factory
        self._models: dict[str, BaseChatModel] = {}

    def _model(self, model_str: str) -> BaseChatModel:
        if model_str not in self._models:
            self._models[model_str] = self._model_factory(
                model_str,
                self.settings,
                max_tokens=self.settings.chat_model_max_tokens,
                temperature=self.settings.chat_temperature,
            )
        return self._models[model_str]

    async def complete(self, prompt: str) -> str:
        """Return the first non-empty answer from the model chain.

        Raises:
            ModelUnavailableError: every model failed or answered empty.
        """
        attempted: list[str] = []
        messages = [SystemMessage(content=ASSISTANT_INSTRUCTIONS), HumanMessage(content=prompt)]

        for model_str in self.settings.model_chain:
            attempted.append(model_str)
            try:
                response = await self._model(model_str).ainvoke(messages)
            except Exception as exc:
                logger.warning("chat_model_failed", model=model_str, error=str(exc))
                continue

            text = _content_text(response.content)
            if text:
                logger.info("chat_model_answered", model=model_str, chars=len(text))
                return text
            logger.warning("chat_model_empty_response", model=model_str)

        raise ModelUnavailableError(attempted)

    async def generate(
        self,
        prompt: str,
        image_data: Optional[str] = None,
        request_text: Optional[str] = None,
    ) -> AIResponse:
        """Single-shot answer with redirect detection and canned fallbacks.

        ``request_text`` is what the user actually typed when ``prompt`` wraps
        it in history or instructions; redirects and fallbacks look at it.
        """
        if image_data:
            return AIResponse(text=IMAGE_REPLY)

        prompt = (prompt or "").strip()
        request_text = (request_text or prompt).strip()
        if not prompt or not self.settings.model_chain:
            return AIResponse(text=LIMITED_MODE_REPLY)

        logger.info("ai_request", prompt_preview=request_text[:50])
        try:
            text = await self.complete(prompt)
        except ModelUnavailableError as exc:
            logger.error("all_chat_models_failed", attempted=exc.attempted)
            return AIResponse(text=fallback_reply(request_text))

        actions: list[AIAction] = []
        url = detect_redirect(request_text)
        if url:
            actions.append(RedirectAction(url=url))
            text = f"Baik! Saya akan membuka {url} untuk Anda.\n\n{text}"
        return AIResponse(text=text, actions=actions)

    async def handle_message(self, session: ResearchSession, text: str) -> ChatTurn:
        """Run one user message through the research flow or plain chat."""
        message = (text or "").strip()
        history = session.render_history(self.settings.chat_history_limit)
        session.add_message("user", message)

        if is_start_command(message):
            session.start()
            return self._reply(session, prompts.WELCOME_MESSAGE, prompts.WELCOME_SUGGESTIONS)

        if session.is_research_mode and is_exit_command(message):
            session.exit()
            return self._reply(session, prompts.EXIT_MESSAGE)

        if session.is_research_mode and is_retry_command(message):
            session.step = ResearchStep.TITLE
            return self._reply(
                session, prompts.ANOTHER_FIELD_MESSAGE, prompts.ANOTHER_FIELD_SUGGESTIONS
            )

        prompt = self._build_prompt(session, message, history)
        response = await self.generate(prompt, request_text=message)

        titles = session.apply_response(response.text, self.extractor)
        if titles:
            turn_text = prompts.TITLES_HEADER.format(count=len(titles))
            return self._reply(
                session,
                turn_text,
                prompts.TITLES_SUGGESTIONS,
                actions=response.actions,
                links=response.text,
                titles=titles,
            )

        reply_text = response.text
        if session.is_research_mode and session.step == ResearchStep.TITLE:
            reply_text = strip_markdown(reply_text)
        return self._reply(
            session, reply_text, response.suggestions, actions=response.actions, links=response.text
        )

    def select_title(self, session: ResearchSession, suggestion_id: str) -> ChatTurn:
        """Confirm a chosen title; unknown ids propagate ``UnknownSuggestionError``."""
        suggestion = session.select_title(suggestion_id)
        return self._reply(
            session, prompts.selection_message(suggestion), prompts.SELECTION_SUGGESTIONS
        )

    def _build_prompt(self, session: ResearchSession, message: str, history: str) -> str:
        if session.wants_title_generation(message):
            return prompts.title_generation_prompt(message, message)

        selected = session.selected_title
        if session.step == ResearchStep.JOURNALS and selected and "jurnal" in message.lower():
            return prompts.journal_search_prompt(selected.title, selected.field)

        return f"{history}\n\nUser: {message}"

    def _reply(
        self,
        session: ResearchSession,
        text: str,
        suggestions: Optional[list[str]] = None,
        actions: Optional[list[AIAction]] = None,
        links: Optional[str] = None,
        titles: Optional[list[ResearchTitleSuggestion]] = None,
    ) -> ChatTurn:
        session.add_message("assistant", text)
        return ChatTurn(
            text=text,
            suggestions=list(suggestions or []),
            actions=list(actions or []),
            links=extract_links(links if links is not None else text),
            title_suggestions=list(titles or []),
            research_step=session.step.value,
        )
