"""Tests for research title extraction."""

import pytest

from research_chat.models.research import Complexity
from research_chat.parsing.titles import ParserConfig, TitleExtractor, extract_titles, label_of

LABELED_RESPONSE = (
    "1. Analisis Dampak Penggunaan AI terhadap Produktivitas Mahasiswa\n"
    "Bidang: Kecerdasan Buatan\n"
    "Tingkat: Sedang\n"
    "Durasi: 6-8 bulan\n"
    "Kata Kunci: AI, Produktivitas, Mahasiswa"
)

MIXED_RESPONSE = """Berikut adalah 3 ide judul penelitian yang inovatif untuk Anda:

1. **Implementasi Machine Learning untuk Prediksi Kelulusan Mahasiswa**
Penelitian ini membangun model klasifikasi dari data akademik.
Tingkat Kompleksitas: Tinggi
Estimasi Durasi: 10-12 bulan

2. **Pengaruh Media Sosial terhadap Minat Belajar Siswa SMA**
Deskripsi: Mengukur hubungan intensitas media sosial dan minat belajar.
Bidang: Pendidikan

### 3. Studi Kelayakan Pembangkit Listrik Tenaga Surya di Desa
Kajian teknis dan ekonomi untuk desa terpencil.

Silakan pilih judul yang paling menarik untuk melanjutkan ke pencarian jurnal.
"""


def test_labeled_title_resolves_explicit_metadata():
    suggestions = extract_titles(LABELED_RESPONSE)

    assert len(suggestions) == 1
    suggestion = suggestions[0]
    assert suggestion.title == "Analisis Dampak Penggunaan AI terhadap Produktivitas Mahasiswa"
    assert suggestion.field == "Kecerdasan Buatan"
    assert suggestion.complexity == Complexity.INTERMEDIATE
    assert suggestion.estimated_duration == "6-8 bulan"
    assert suggestion.keywords == ["AI", "Produktivitas", "Mahasiswa"]
    assert suggestion.description.startswith("Studi analitis mendalam")


def test_mixed_response_in_source_order():
    suggestions = extract_titles(MIXED_RESPONSE)

    assert [s.title for s in suggestions] == [
        "Implementasi Machine Learning untuk Prediksi Kelulusan Mahasiswa",
        "Pengaruh Media Sosial terhadap Minat Belajar Siswa SMA",
        "Studi Kelayakan Pembangkit Listrik Tenaga Surya di Desa",
    ]

    first, second, third = suggestions
    assert first.description == "Penelitian ini membangun model klasifikasi dari data akademik."
    assert first.complexity == Complexity.ADVANCED
    assert first.estimated_duration == "10-12 bulan"
    assert first.field == "Kecerdasan Buatan"

    assert second.description == "Mengukur hubungan intensitas media sosial dan minat belajar."
    assert second.field == "Pendidikan"
    assert second.complexity == Complexity.INTERMEDIATE
    assert second.estimated_duration == "6-8 bulan"

    assert third.description == "Kajian teknis dan ekonomi untuk desa terpencil."
    assert third.field == "Multidisiplin"
    assert third.keywords == ["Penelitian", "Inovasi"]


def test_explicit_labels_win_over_inference():
    text = (
        "1. Penerapan Deep Learning untuk Diagnosis Penyakit Paru\n"
        "Bidang: Kesehatan\n"
        "Kompleksitas: Pemula\n"
    )
    (suggestion,) = extract_titles(text)

    assert suggestion.field == "Kesehatan"
    assert suggestion.complexity == Complexity.BEGINNER
    assert suggestion.estimated_duration == "4-6 bulan"


def test_unrecognized_labels_fall_back_to_inference():
    text = (
        "1. Optimasi Jaringan Saraf Tiruan untuk Peramalan Cuaca\n"
        "Bidang: Sejarah Kuno\n"
        "Durasi: secepatnya\n"
        "Kata Kunci:\n"
    )
    (suggestion,) = extract_titles(text)

    assert suggestion.field == "Multidisiplin"
    assert suggestion.complexity == Complexity.ADVANCED
    assert suggestion.estimated_duration == "8-12 bulan"
    assert suggestion.keywords == ["Optimasi", "Penelitian", "Inovasi"]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Halo! Ada yang bisa saya bantu hari ini?",
        "Ini jawaban biasa.\nTanpa judul apa pun.\n\nTerima kasih.",
        "1. Pendek\n2. Juga pendek",
    ],
)
def test_no_headings_returns_empty(text):
    assert extract_titles(text) == []


def test_instruction_and_intro_lines_are_not_titles():
    text = (
        "## Berikut adalah rekomendasi judul penelitian untuk Anda\n"
        "1. Silakan pilih judul yang sesuai dengan minat penelitian Anda\n"
        "- **🎯 Rekomendasi Judul Penelitian Terbaik Untuk Anda**\n"
    )
    assert extract_titles(text) == []


def test_short_candidate_without_vocabulary_is_rejected():
    # numbered and long enough to be a candidate, but no vocabulary and <= 30 chars
    assert extract_titles("1. Kebiasaan Tidur Remaja Kota") == []
    # same shape, over 30 chars, is accepted on length alone
    assert len(extract_titles("1. Kebiasaan Tidur Remaja Kota Besar Indonesia")) == 1


def test_bold_and_quoted_headings():
    text = (
        '**Perancangan Aplikasi Kasir untuk Warung Kecil**\n'
        '\n'
        '"Evaluasi Kualitas Air Sungai di Kawasan Industri"\n'
    )
    titles = [s.title for s in extract_titles(text)]
    assert titles == [
        "Perancangan Aplikasi Kasir untuk Warung Kecil",
        "Evaluasi Kualitas Air Sungai di Kawasan Industri",
    ]


def test_lookahead_is_bounded_by_window():
    config = ParserConfig(lookahead_window=1)
    text = (
        "1. Analisis Pola Belanja Konsumen Daring\n"
        "Konsumen muda lebih sering berbelanja malam hari.\n"
        "Bidang: Ekonomi dan Bisnis\n"
    )
    (suggestion,) = extract_titles(text, config)

    assert suggestion.description == "Konsumen muda lebih sering berbelanja malam hari."
    # the label sits outside the one-line window, so the field is inferred
    assert suggestion.field == "Multidisiplin"


def test_bullet_lines_inside_lookahead_become_description():
    text = (
        "1. Pengembangan Sistem Informasi Posyandu Berbasis Mobile\n"
        "- Mencatat tumbuh kembang balita secara digital\n"
        "- Mengirim pengingat jadwal imunisasi\n"
    )
    (suggestion,) = extract_titles(text)

    assert suggestion.description == (
        "Mencatat tumbuh kembang balita secara digital Mengirim pengingat jadwal imunisasi"
    )


def test_suggestion_ids_are_unique():
    suggestions = extract_titles(MIXED_RESPONSE)
    assert len({s.id for s in suggestions}) == len(suggestions)


def test_suggestion_serializes_camel_case_duration():
    (suggestion,) = extract_titles(LABELED_RESPONSE)
    payload = suggestion.model_dump(by_alias=True, mode="json")

    assert payload["estimatedDuration"] == "6-8 bulan"
    assert payload["complexity"] == "intermediate"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Bidang: Kesehatan", ("field", "Kesehatan")),
        ("Bidang Studi: Kesehatan", ("field", "Kesehatan")),
        ("Tingkat Kompleksitas: Tinggi", ("complexity", "Tinggi")),
        ("Keywords: AI, IoT", ("keywords", "AI, IoT")),
        ("Bidang Studi yang Spesifik: Kesehatan", ("field", "Kesehatan")),
        ("Deskripsi Singkat Penelitian: Ringkas", ("description", "Ringkas")),
        ("Kata Kunci Utama: AI", ("keywords", "AI")),
        ("Estimasi Harga Rumah dengan Regresi Linear: Studi Kasus", None),
        ("Analisis Data", None),
    ],
)
def test_label_of(line, expected):
    assert label_of(line) == expected


def test_extractor_is_reusable():
    extractor = TitleExtractor()
    assert len(extractor.extract(LABELED_RESPONSE)) == 1
    assert len(extractor.extract(LABELED_RESPONSE)) == 1


def test_multi_word_bold_labels_stay_with_their_title():
    text = (
        "**1. Analisis Sentimen Ulasan Produk Menggunakan Deep Learning**\n"
        "- **Deskripsi Singkat Penelitian:** Mengklasifikasikan ulasan pelanggan.\n"
        "- **Bidang Studi yang Spesifik:** Kesehatan Masyarakat dan Epidemiologi\n"
        "- **Tingkat Kompleksitas Penelitian:** Tinggi\n"
        "- **Estimasi Durasi Penelitian:** 10-12 bulan\n"
        "- **Kata Kunci Utama:** Sentimen, NLP\n"
    )
    suggestions = extract_titles(text)

    assert len(suggestions) == 1
    suggestion = suggestions[0]
    assert suggestion.title == "Analisis Sentimen Ulasan Produk Menggunakan Deep Learning"
    assert suggestion.description == "Mengklasifikasikan ulasan pelanggan."
    assert suggestion.field == "Kesehatan"
    assert suggestion.complexity == Complexity.ADVANCED
    assert suggestion.estimated_duration == "10-12 bulan"
    assert suggestion.keywords == ["Sentimen", "NLP"]
