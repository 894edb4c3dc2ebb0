"""Presentation text for a selected research title suggestion."""

from __future__ import annotations

from research_chat.models.research import DEFAULT_FIELD, Complexity, ResearchTitleSuggestion

DEFAULT_DESCRIPTION = "Penelitian yang menarik dan layak untuk diteliti lebih lanjut."

COMPLEXITY_NOTES = {
    Complexity.BEGINNER: "Penelitian tingkat pemula yang cocok untuk mahasiswa S1 atau peneliti baru.",
    Complexity.INTERMEDIATE: "Penelitian tingkat menengah yang membutuhkan pemahaman mendalam tentang metodologi.",
    Complexity.ADVANCED: "Penelitian tingkat lanjut yang memerlukan keahlian khusus dan analisis kompleks.",
}

FIELD_SCOPES = {
    "Kecerdasan Buatan": "Mengeksplorasi algoritma pembelajaran mesin, neural networks, dan aplikasi AI dalam berbagai domain.",
    "Teknologi Informasi": "Mengkaji sistem informasi, pengembangan software, dan infrastruktur teknologi.",
    "Ekonomi dan Bisnis": "Menganalisis aspek ekonomi, model bisnis, dan dampak terhadap industri.",
    "Kesehatan": "Meneliti aplikasi teknologi dalam bidang medis dan kesehatan masyarakat.",
    "Pendidikan": "Mengkaji implementasi teknologi dalam proses pembelajaran dan pendidikan.",
    "Lingkungan dan Energi": "Meneliti solusi berkelanjutan dan teknologi ramah lingkungan.",
    "Teknik dan Industri": "Mengeksplorasi inovasi dalam proses industri dan teknologi manufaktur.",
    DEFAULT_FIELD: "Penelitian yang menggabungkan berbagai bidang ilmu untuk solusi holistik.",
}

METHODOLOGIES = {
    Complexity.BEGINNER: (
        "Studi literatur komprehensif",
        "Survei dan kuesioner",
        "Analisis deskriptif",
        "Prototype sederhana",
        "Observasi dan dokumentasi",
    ),
    Complexity.INTERMEDIATE: (
        "Eksperimen terkontrol",
        "Analisis statistik lanjutan",
        "Pengembangan model/algoritma",
        "Implementasi sistem",
        "Validasi dan testing",
        "Analisis perbandingan",
    ),
    Complexity.ADVANCED: (
        "Machine learning dan deep learning",
        "Optimasi algoritma kompleks",
        "Simulasi dan pemodelan matematika",
        "Analisis big data",
        "Penelitian eksperimental skala besar",
        "Pengembangan framework inovatif",
    ),
}

FIELD_OUTCOMES = {
    "Kecerdasan Buatan": (
        "Model AI dengan akurasi tinggi",
        "Algoritma yang efisien",
        "Aplikasi AI yang inovatif",
    ),
    "Teknologi Informasi": (
        "Sistem informasi yang robust",
        "Aplikasi software yang user-friendly",
        "Arsitektur sistem yang scalable",
    ),
    "Ekonomi dan Bisnis": (
        "Model bisnis yang tervalidasi",
        "Analisis ROI yang komprehensif",
        "Strategi implementasi",
    ),
}

GENERAL_OUTCOMES = (
    "Kontribusi ilmiah yang signifikan",
    "Solusi inovatif untuk masalah nyata",
    "Publikasi di jurnal bereputasi",
)


def comprehensive_description(suggestion: ResearchTitleSuggestion) -> str:
    base = suggestion.description or DEFAULT_DESCRIPTION
    note = COMPLEXITY_NOTES[suggestion.complexity]
    return f"{base} {note} Estimasi waktu penelitian: {suggestion.estimated_duration}."


def research_scope(suggestion: ResearchTitleSuggestion) -> str:
    return FIELD_SCOPES.get(suggestion.field, FIELD_SCOPES[DEFAULT_FIELD])


def methodology_approach(suggestion: ResearchTitleSuggestion) -> str:
    methods = METHODOLOGIES[suggestion.complexity][:3]
    return f"Metodologi yang disarankan: {', '.join(methods)}."


def expected_outcomes(suggestion: ResearchTitleSuggestion) -> str:
    outcomes = FIELD_OUTCOMES.get(suggestion.field, GENERAL_OUTCOMES)
    return f"Hasil yang diharapkan: {', '.join(outcomes)}."


def suggestion_details(suggestion: ResearchTitleSuggestion) -> dict[str, str]:
    """All presentation blocks for one suggestion, keyed for the client."""
    return {
        "description": comprehensive_description(suggestion),
        "scope": research_scope(suggestion),
        "methodology": methodology_approach(suggestion),
        "expectedResults": expected_outcomes(suggestion),
    }
