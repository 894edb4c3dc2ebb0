"""Fixed word lists used by the title and metadata heuristics.

Model output is mostly Indonesian with English technical terms mixed in,
so every list carries both.
"""

from __future__ import annotations

import re


FIELD_FAMILIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Kecerdasan Buatan",
        (
            "ai",
            "artificial intelligence",
            "kecerdasan buatan",
            "machine learning",
            "deep learning",
            "neural network",
            "computer vision",
            "natural language processing",
            "nlp",
        ),
    ),
    (
        "Teknologi Informasi",
        (
            "blockchain",
            "sistem informasi",
            "teknologi informasi",
            "informatika",
            "ilmu komputer",
            "computer science",
            "software",
            "perangkat lunak",
            "aplikasi",
            "database",
            "basis data",
            "web",
            "mobile",
        ),
    ),
    (
        "Ekonomi dan Bisnis",
        (
            "ekonomi",
            "bisnis",
            "keuangan",
            "manajemen",
            "marketing",
            "pemasaran",
            "e-commerce",
            "financial",
            "market",
            "umkm",
        ),
    ),
    (
        "Kesehatan",
        ("kesehatan", "medis", "kedokteran", "farmasi", "biomedis", "health", "medical"),
    ),
    (
        "Pendidikan",
        ("pendidikan", "pembelajaran", "edukasi", "kurikulum", "teaching", "education"),
    ),
    (
        "Lingkungan dan Energi",
        ("lingkungan", "energi", "sustainability", "renewable", "environment", "energy"),
    ),
    (
        "Teknik dan Industri",
        ("teknik", "engineering", "industri", "manufaktur", "manufacturing"),
    ),
)

FIELD_LABELS: tuple[str, ...] = tuple(label for label, _ in FIELD_FAMILIES)

# Matched at the start of a word, so Indonesian prefixed forms are listed separately
ADVANCED_TERMS = (
    "optimasi",
    "pengoptimasian",
    "neural",
    "quantum",
    "advanced",
    "hybrid",
    "blockchain",
    "big data",
    "reinforcement learning",
)

BEGINNER_TERMS = ("survey", "overview", "pengenalan", "dasar", "basic", "fundamental")

# (match term, display label); only the first word of a term is matched
TECH_TERMS: tuple[tuple[str, str], ...] = (
    ("ai", "AI"),
    ("machine learning", "Machine Learning"),
    ("blockchain", "Blockchain"),
    ("iot", "IoT"),
    ("big data", "Big Data"),
    ("cloud", "Cloud"),
    ("mobile", "Mobile"),
    ("web", "Web"),
    ("sistem", "Sistem"),
    ("algoritma", "Algoritma"),
    ("optimasi", "Optimasi"),
    ("neural", "Neural Network"),
    ("deep learning", "Deep Learning"),
    ("database", "Database"),
    ("security", "Security"),
    ("reinforcement learning", "Reinforcement Learning"),
    ("computer vision", "Computer Vision"),
    ("natural language", "Natural Language"),
    ("data mining", "Data Mining"),
    ("bioinformatics", "Bioinformatics"),
    ("robotics", "Robotics"),
    ("automation", "Automation"),
    ("digitalization", "Digitalization"),
)

RESEARCH_WORDS = re.compile(
    r"\b(analisis|implementasi|pengembangan|pengaruh|hubungan|perancangan|evaluasi|studi|"
    r"kajian|optimasi|pemanfaatan|penerapan|sistem|aplikasi|model|prediksi)\b",
    re.IGNORECASE,
)

METHOD_WORDS = re.compile(
    r"\b(machine learning|deep learning|ai|artificial intelligence|blockchain|iot|algoritma|"
    r"metode|teknik|teknologi|otomatis)\b",
    re.IGNORECASE,
)

# Labeled metadata lines, up to three qualifier words before the colon:
# "Bidang Studi yang Spesifik: Kesehatan", "Deskripsi Singkat Penelitian: ..."
LABEL_LINE = re.compile(
    r"^(?P<label>deskripsi|description|bidang|field|tingkat kompleksitas|kompleksitas|complexity|"
    r"tingkat kesulitan|tingkat|kesulitan|estimasi durasi|estimasi waktu|estimasi|durasi|duration|"
    r"kata kunci|keywords?)\b(?:[ \t]+[\w()/-]+){0,3}[ \t]*:\s*(?P<value>.*)$",
    re.IGNORECASE,
)

LABEL_KINDS = {
    "deskripsi": "description",
    "description": "description",
    "bidang": "field",
    "field": "field",
    "tingkat kompleksitas": "complexity",
    "kompleksitas": "complexity",
    "complexity": "complexity",
    "tingkat kesulitan": "complexity",
    "tingkat": "complexity",
    "kesulitan": "complexity",
    "estimasi durasi": "duration",
    "estimasi waktu": "duration",
    "estimasi": "duration",
    "durasi": "duration",
    "duration": "duration",
    "kata kunci": "keywords",
    "keyword": "keywords",
    "keywords": "keywords",
}

# Prompt echo and UI instructions, never a title or a description
INSTRUCTION_PHRASES = re.compile(
    r"\b(pilih judul|klik pada|memilihnya|melanjutkan|pencarian jurnal|layak untuk|lebih lanjut|"
    r"buatkan|berikan|tolong|silakan|silahkan|untuk setiap|gunakan format|contoh judul|"
    r"contoh penelitian)\b",
    re.IGNORECASE,
)

INTRO_PHRASES = re.compile(r"\b(ide judul|pilihan judul|rekomendasi judul|berikut adalah|berikut ini)\b", re.IGNORECASE)
INTRO_QUALIFIERS = re.compile(r"\b(alternatif|inovatif|berikut)\b", re.IGNORECASE)

BANNER_EMOJI = re.compile("[✨🎯🔬📚⭐🚀💡📋📊]")

DURATION_RANGE = re.compile(r"(\d+\s*[-–]\s*\d+\s*(?:bulan|tahun|months?|years?))", re.IGNORECASE)
DURATION_SINGLE = re.compile(r"(\d+\s*(?:bulan|tahun|months?|years?))", re.IGNORECASE)

COMPLEXITY_LABEL_TERMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("advanced", ("tinggi", "lanjut", "advanced", "sulit", "kompleks")),
    ("intermediate", ("sedang", "menengah", "intermediate", "medium")),
    ("beginner", ("pemula", "beginner", "mudah", "dasar", "rendah")),
)


def term_pattern(term: str) -> re.Pattern[str]:
    """Compile a lowercase term; short terms must match a whole word."""
    if len(term) <= 3:
        return re.compile(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])")
    return re.compile(re.escape(term))
