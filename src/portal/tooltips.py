# This file defines help text for summary cards and charts across the role dashboards.
# It exists so staff can interpret balances, queues, and commission figures the same way on every page.
# A single dictionary keeps explanations consistent between pages and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "total_members_card": "Jumlah seluruh anggota yang terdaftar, termasuk yang masih menunggu persetujuan.",
    "active_members_card": "Anggota dengan status aktif yang dapat bertransaksi.",
    "locked_members_card": "Anggota yang akunnya sedang dikunci oleh admin.",
    "total_balance_card": "Jumlah saldo seluruh anggota pada snapshot data terakhir.",
    "pending_deposits_card": "Deposit yang menunggu persetujuan agent atau admin.",
    "pending_withdrawals_card": "Penarikan yang menunggu persetujuan agent atau admin.",
    "pending_members_card": "Pendaftaran anggota baru yang belum disetujui.",
    "my_customers_card": "Pelanggan aktif yang ditugaskan kepada Anda.",
    "customer_balance_card": "Jumlah saldo pelanggan aktif yang ditugaskan kepada Anda.",
    "commission_month_card": "Komisi dari deposit pelanggan yang disetujui pada bulan berjalan.",
    "commission_total_card": "Akumulasi komisi dari seluruh deposit pelanggan yang disetujui.",
    "commission_rate_card": "Persentase komisi yang berlaku untuk deposit pelanggan Anda.",
    "commission_chart": "Komisi per bulan berdasarkan tanggal deposit diproses.",
    "status_breakdown_chart": "Jumlah transaksi per status pada data yang sedang ditampilkan.",
    "balance_distribution_chart": "Sepuluh anggota dengan saldo terbesar.",
    "unread_notifications_card": "Notifikasi yang belum Anda baca.",
}
