"""Prompts and canned messages for the research assistant flow."""

from research_chat.models.research import ResearchTitleSuggestion


WELCOME_MESSAGE = """# 🔬 **SELAMAT DATANG DI RESEARCH ASSISTANT!**

Saya akan membantu Anda dalam perjalanan penelitian akademik, dari penentuan judul hingga pencarian referensi.

### 📋 **TAHAP 1: PENENTUAN JUDUL PENELITIAN**

#### **OPSI A: Sudah Memiliki Judul**
- Langsung masukkan judul penelitian Anda
- Sistem akan memvalidasi kelayakan dan relevansi

#### **OPSI B: Belum Memiliki Judul**
- Ceritakan latar belakang yang menarik minat Anda
- Sebutkan bidang studi yang ingin dieksplorasi
- AI akan menghasilkan rekomendasi judul original

### 🚀 **Siap Memulai?** Pilih opsi di bawah atau ketik langsung!"""

WELCOME_SUGGESTIONS = [
    "Saya sudah punya judul penelitian",
    "Belum punya judul - bidang AI",
    "Bidang teknik informatika",
    "Bidang ekonomi dan bisnis",
    "Bidang kesehatan",
    "Bidang pendidikan",
]

TITLES_HEADER = """🎯 **Rekomendasi Judul Penelitian**

Berdasarkan bidang dan latar belakang yang Anda berikan, berikut adalah {count} judul penelitian yang original dan dapat diteliti:"""

TITLES_SUGGESTIONS = ["Cari judul lain", "Ganti bidang penelitian", "Kembali ke chat biasa"]

ANOTHER_FIELD_MESSAGE = (
    "Silakan berikan latar belakang atau bidang penelitian yang berbeda untuk mendapatkan "
    "rekomendasi judul yang baru:"
)

ANOTHER_FIELD_SUGGESTIONS = [
    "Bidang Teknik Informatika",
    "Bidang Ekonomi",
    "Bidang Kesehatan",
    "Bidang Pendidikan",
    "Bidang Lingkungan",
]

SELECTION_SUGGESTIONS = ["Lanjutkan pencarian jurnal", "Ganti judul penelitian", "Lihat detail lengkap"]

EXIT_MESSAGE = "Mode research assistant ditutup. Silakan lanjutkan chat seperti biasa."


def title_generation_prompt(background: str, field: str) -> str:
    return f"""Berdasarkan latar belakang "{background}" dan bidang "{field}", buatkan 5 judul penelitian yang:
1. ORIGINAL dan BUKAN template
2. Spesifik dan dapat diteliti
3. Memiliki kontribusi ilmiah yang jelas
4. Sesuai dengan tren penelitian terkini
5. Realistis untuk diselesaikan

Berikan response dalam format yang mudah dibaca oleh pengguna. Untuk setiap judul, jelaskan:
- Deskripsi singkat penelitian (2-3 kalimat)
- Tingkat kompleksitas penelitian
- Estimasi durasi penelitian
- Kata kunci utama
- Bidang studi yang spesifik

Tuliskan dalam format yang menarik dan mudah dipahami, JANGAN gunakan format JSON atau kode."""


def journal_search_prompt(title: str, field: str) -> str:
    return f"""Berdasarkan judul penelitian "{title}" di bidang "{field}", carikan 8-10 jurnal penelitian berkualitas yang RELEVAN.

Tolong berikan daftar jurnal dengan format yang mudah dibaca:
1. Terindeks Scopus (Q1-Q4) atau SINTA (1-5)
2. Publikasi tahun 2019-2024
3. Topik yang sangat relevan dengan judul penelitian
4. Impact factor yang baik

Untuk setiap jurnal, tuliskan nama jurnal dan tautannya dalam format "Nama Jurnal: https://...".
JANGAN gunakan format JSON atau kode."""


def selection_message(suggestion: ResearchTitleSuggestion) -> str:
    """Confirmation shown after the user picks a title."""
    return f"""🎉 **JUDUL PENELITIAN BERHASIL DIPILIH!**

### 📋 **Judul Terpilih:**
> **"{suggestion.title}"**

### 📊 **Detail Penelitian:**
- **Bidang:** {suggestion.field}
- **Kompleksitas:** {suggestion.complexity.value}
- **Estimasi Durasi:** {suggestion.estimated_duration}
- **Keywords:** {', '.join(suggestion.keywords)}

### 🚀 **Langkah Selanjutnya: Pencarian Referensi Jurnal**
Saya akan mencari jurnal berkualitas yang relevan dengan topik penelitian Anda."""
