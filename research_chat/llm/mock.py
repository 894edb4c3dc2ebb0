"""Mock chat model for offline development and tests."""

from __future__ import annotations

import re
from typing import Any, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult


class MockChatModel(BaseChatModel):
    """Minimal chat model that returns deterministic responses."""

    model_name: str = "mock"

    @property
    def _llm_type(self) -> str:
        return "mock-chat"

    def _generate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        content = self._compose_response(messages)
        message = AIMessage(content=content)
        return ChatResult(generations=[ChatGeneration(message=message)])

    async def _agenerate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        return self._generate(messages, stop=stop, run_manager=run_manager, **kwargs)

    def _compose_response(self, messages: List[BaseMessage]) -> str:
        if not messages:
            return "Mock response."

        last = messages[-1].content if hasattr(messages[-1], "content") else ""
        last_text = str(last)
        lower = last_text.lower()

        if "judul penelitian" in lower and "buatkan" in lower:
            field = self._extract_field(last_text)
            return (
                f"Berikut adalah 3 judul penelitian untuk bidang {field}:\n\n"
                "1. **Analisis Sentimen Ulasan Produk Menggunakan Deep Learning**\n"
                "Deskripsi: Penelitian ini mengklasifikasikan ulasan pelanggan secara otomatis.\n"
                "Bidang: Kecerdasan Buatan\n"
                "Tingkat Kompleksitas: Tinggi\n"
                "Estimasi Durasi: 8-12 bulan\n"
                "Kata Kunci: Deep Learning, NLP, Sentimen\n\n"
                "2. **Pengembangan Sistem Informasi Perpustakaan Berbasis Web**\n"
                "Deskripsi: Membangun sistem katalog dan peminjaman buku yang mudah digunakan.\n"
                "Bidang: Teknologi Informasi\n"
                "Tingkat Kompleksitas: Sedang\n"
                "Estimasi Durasi: 6-8 bulan\n\n"
                "3. **Studi Pengaruh Media Sosial terhadap Minat Belajar Siswa**\n"
                "Deskripsi: Mengukur hubungan durasi penggunaan media sosial dengan minat belajar.\n"
                "Bidang: Pendidikan\n"
                "Tingkat Kompleksitas: Pemula\n"
                "Estimasi Durasi: 4-6 bulan\n"
            )

        if "jurnal" in lower:
            return (
                "Berikut beberapa jurnal yang relevan:\n\n"
                "1. IEEE Access: https://ieeeaccess.ieee.org\n"
                "2. **Jurnal Teknologi Informasi**: https://jurnal.example.ac.id/jti\n"
                "3. [Scopus](https://www.scopus.com)\n"
            )

        return "Mock response based on provided context."

    def _extract_field(self, text: str) -> str:
        match = re.search(r'bidang "([^"]+)"', text, re.IGNORECASE)
        if match:
            return match.group(1).strip()
        return "umum"
