# This file stores copy blocks for headings, status labels, and empty-state messages.
# It exists so wording stays consistent across the role panels.
# Centralizing text also makes future wording reviews easier without touching rendering logic.
# The portal speaks Indonesian to customers and agents, matching the labels the API uses.

from __future__ import annotations

APP_TITLE = "Member Portal"
SIGN_IN_TITLE = "Masuk"
SIGN_IN_HELP = "Masukkan email akun Anda untuk membuka panel sesuai peran."

LOADING = "Memuat data..."
RETRY = "Coba lagi"
QUERY_FAILED = "Data tidak dapat dimuat."
NOT_FOUND_TITLE = "404 Halaman tidak ditemukan"
NOT_FOUND_MESSAGE = "Halaman yang Anda cari tidak tersedia di panel ini."

REFRESH_OK = "Sesi diperbarui. Data sesi Anda telah diperbarui."
REFRESH_FAILED = "Sesi tidak valid. Silakan login ulang."

DEPOSIT_STATUS_LABELS: dict[str, str] = {
    "pending": ":orange[Pending]",
    "approved": ":green[Disetujui]",
    "rejected": ":red[Ditolak]",
}

WITHDRAWAL_STATUS_LABELS: dict[str, str] = {
    "pending": ":orange[Pending]",
    "approved": ":green[Diproses]",
    "rejected": ":red[Ditolak]",
}

MEMBER_STATUS_LABELS: dict[str, str] = {
    "pending": ":orange[Menunggu]",
    "active": ":green[Aktif]",
    "suspended": ":red[Ditangguhkan]",
    "inactive": ":gray[Nonaktif]",
}

ROLE_LABELS: dict[str, str] = {
    "master": ":violet[Master]",
    "admin": ":blue[Admin]",
    "agent": ":green[Agent]",
    "customer": ":gray[Customer]",
}

NOTIFICATION_ICONS: dict[str, str] = {
    "error": ":material/error:",
    "warning": ":material/warning:",
    "success": ":material/check_circle:",
    "info": ":material/info:",
}

MALL_CATEGORIES: tuple[str, ...] = ("Semua", "Elektronik", "Fashion", "Kesehatan", "Makanan")

RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "1. Penggunaan Akun",
        (
            "Akun hanya boleh digunakan oleh pemilik yang terdaftar.",
            "Dilarang menggunakan akun untuk aktivitas ilegal, termasuk pencucian uang dan penyalahgunaan dana.",
        ),
    ),
    (
        "2. Komisi",
        ("Besaran komisi mengikuti jenis produk dan ditampilkan pada halaman Mall.",),
    ),
    (
        "3. Proses Penarikan Dana",
        (
            "Pencairan dana ke rekening biasanya selesai dalam 3 sampai 15 menit.",
            "Dalam kondisi tertentu pencairan dapat memakan waktu hingga 24 jam.",
        ),
    ),
    (
        "4. Pemeriksaan Saldo",
        (
            "Pastikan saldo telah masuk sebelum mengajukan penarikan.",
            "Hindari mengajukan penarikan berulang dalam waktu singkat.",
        ),
    ),
    (
        "5. Rekening Bank",
        ("Pastikan data rekening bank sesuai dengan nama pemilik akun.",),
    ),
)


def status_label(labels: dict[str, str], status: str | None) -> str:
    if not status:
        return "-"
    return labels.get(status, status)
