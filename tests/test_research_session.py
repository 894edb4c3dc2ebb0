"""Tests for research session state, presentation details and the session store."""

import pytest

from research_chat.chat.sessions import SessionStore
from research_chat.exceptions import UnknownSuggestionError
from research_chat.models.research import Complexity, ResearchTitleSuggestion
from research_chat.research.details import suggestion_details
from research_chat.research.prompts import journal_search_prompt, selection_message, title_generation_prompt
from research_chat.research.session import (
    ResearchSession,
    ResearchStep,
    is_exit_command,
    is_retry_command,
    is_start_command,
)

TITLE_RESPONSE = (
    "Berikut 2 judul penelitian untuk Anda:\n\n"
    "1. Analisis Sentimen Ulasan Aplikasi Transportasi Online\n"
    "Bidang: Kecerdasan Buatan\n\n"
    "2. Pengembangan Sistem Informasi Inventaris Laboratorium\n"
    "Tingkat Kompleksitas: Rendah\n"
)


@pytest.fixture
def session():
    research = ResearchSession(session_id="s-1")
    research.start()
    return research


def test_start_and_exit_commands():
    assert is_start_command("Mulai Penelitian")
    assert is_start_command("tolong start research sekarang")
    assert not is_start_command("halo")
    assert is_exit_command("Kembali ke chat biasa")
    assert is_retry_command("Cari judul lain")


def test_start_enters_title_step():
    research = ResearchSession(session_id="s-2")
    assert research.step == ResearchStep.INITIAL

    research.start()
    assert research.is_research_mode
    assert research.step == ResearchStep.TITLE

    research.exit()
    assert not research.is_research_mode
    assert research.step == ResearchStep.INITIAL


def test_wants_title_generation_only_in_title_step(session):
    assert session.wants_title_generation("Belum punya judul - bidang AI")
    assert not session.wants_title_generation("Apa kabar?")

    idle = ResearchSession(session_id="s-3")
    assert not idle.wants_title_generation("Belum punya judul - bidang AI")


def test_apply_response_stores_titles(session):
    titles = session.apply_response(TITLE_RESPONSE)

    assert [t.title for t in titles] == [
        "Analisis Sentimen Ulasan Aplikasi Transportasi Online",
        "Pengembangan Sistem Informasi Inventaris Laboratorium",
    ]
    assert session.title_suggestions == titles
    assert titles[0].field == "Kecerdasan Buatan"
    assert titles[1].complexity == Complexity.BEGINNER


def test_apply_response_ignored_outside_title_step():
    idle = ResearchSession(session_id="s-4")
    assert idle.apply_response(TITLE_RESPONSE) == []
    assert idle.title_suggestions == []


def test_apply_response_requires_title_marker(session):
    text = "1. Analisis Sentimen Ulasan Aplikasi Transportasi Online"
    assert session.apply_response(text) == []


def test_select_title_moves_to_journals(session):
    titles = session.apply_response(TITLE_RESPONSE)

    chosen = session.select_title(titles[1].id)

    assert chosen == titles[1]
    assert session.selected_title == titles[1]
    assert session.step == ResearchStep.JOURNALS


def test_select_unknown_title_raises(session):
    session.apply_response(TITLE_RESPONSE)

    with pytest.raises(UnknownSuggestionError) as exc_info:
        session.select_title("missing")

    assert exc_info.value.suggestion_id == "missing"
    assert session.step == ResearchStep.TITLE
    assert session.selected_title is None


def test_render_history_limits_messages():
    research = ResearchSession(session_id="s-5")
    assert research.render_history(6) == "Chat history: None."

    for index in range(4):
        research.add_message("user", f"pesan {index}")
    research.add_message("assistant", "")

    rendered = research.render_history(2)
    assert rendered == "Chat history:\n- user: pesan 2\n- user: pesan 3"


def test_history_keeps_only_newest_messages():
    research = ResearchSession(session_id="s-6", max_history=50)

    for index in range(1000):
        research.add_message("user", f"pesan {index}")

    assert len(research.history) == 50
    assert research.history[0]["content"] == "pesan 950"
    assert research.history[-1]["content"] == "pesan 999"


def test_suggestion_details_blocks():
    suggestion = ResearchTitleSuggestion(
        title="Analisis Sentimen Ulasan",
        description="Klasifikasi ulasan pelanggan.",
        field="Kecerdasan Buatan",
        complexity=Complexity.ADVANCED,
        estimated_duration="8-12 bulan",
        keywords=["AI"],
    )
    details = suggestion_details(suggestion)

    assert set(details) == {"description", "scope", "methodology", "expectedResults"}
    assert details["description"].startswith("Klasifikasi ulasan pelanggan. Penelitian tingkat lanjut")
    assert details["description"].endswith("Estimasi waktu penelitian: 8-12 bulan.")
    assert details["scope"].startswith("Mengeksplorasi algoritma pembelajaran mesin")
    assert details["methodology"] == (
        "Metodologi yang disarankan: Machine learning dan deep learning, "
        "Optimasi algoritma kompleks, Simulasi dan pemodelan matematika."
    )
    assert "Model AI dengan akurasi tinggi" in details["expectedResults"]


def test_suggestion_details_for_unmapped_field():
    suggestion = ResearchTitleSuggestion(title="Judul", description="", field="Pendidikan")
    details = suggestion_details(suggestion)

    assert details["description"].startswith("Penelitian yang menarik dan layak")
    assert details["expectedResults"].startswith("Hasil yang diharapkan: Kontribusi ilmiah")


def test_prompts_embed_inputs():
    suggestion = ResearchTitleSuggestion(title="Judul Uji", description="", keywords=["A", "B"])

    assert '"bidang AI"' in title_generation_prompt("latar", "bidang AI")
    assert '"Judul Uji"' in journal_search_prompt("Judul Uji", "Multidisiplin")
    message = selection_message(suggestion)
    assert '"Judul Uji"' in message
    assert "A, B" in message


def test_session_store_evicts_oldest():
    store = SessionStore(limit=2)
    first = store.get_or_create("a")
    store.get_or_create("b")
    assert store.get_or_create("a") is first

    store.get_or_create("c")

    assert len(store) == 2
    assert store.get("b") is None
    assert store.get("a") is first
    assert store.drop("c")
    assert not store.drop("c")


def test_session_store_caps_history_per_session():
    store = SessionStore(limit=2, history_limit=3)
    research = store.get_or_create("a")

    for index in range(5):
        research.add_message("assistant", f"balasan {index}")

    assert research.max_history == 3
    assert [item["content"] for item in research.history] == ["balasan 2", "balasan 3", "balasan 4"]
