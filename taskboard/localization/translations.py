"""Translation bundles."""
from __future__ import annotations

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "errors.resource_not_found": "Resource not found",
        "errors.task_not_found": "Task {task_id} not found",
        "errors.validation_error": "Validation error",
        "errors.fetch_failed": "Failed to fetch tasks",
        "errors.write_failed": "Failed to save task",
        "errors.locale_not_supported": "Locale '{code}' is not supported",
        "priority.LOW": "Low",
        "priority.MEDIUM": "Medium",
        "priority.HIGH": "High",
        "status.PENDING": "Pending",
        "status.COMPLETED": "Completed",
        "sort.DUE_DATE": "Due date",
        "sort.PRIORITY": "Priority",
        "sort.TITLE": "Task name",
    },
    "id": {
        "errors.resource_not_found": "Sumber daya tidak ditemukan",
        "errors.task_not_found": "Tugas {task_id} tidak ditemukan",
        "errors.validation_error": "Kesalahan validasi",
        "errors.fetch_failed": "Gagal mengambil tugas",
        "errors.write_failed": "Gagal menyimpan tugas",
        "errors.locale_not_supported": "Bahasa '{code}' tidak didukung",
        "priority.LOW": "Rendah",
        "priority.MEDIUM": "Sedang",
        "priority.HIGH": "Tinggi",
        "status.PENDING": "Belum Selesai",
        "status.COMPLETED": "Selesai",
        "sort.DUE_DATE": "Tanggal",
        "sort.PRIORITY": "Prioritas",
        "sort.TITLE": "Nama Tugas",
    },
}

_LOCALE_NAMES = {
    "en": "English",
    "id": "Bahasa Indonesia",
}


def get_available_locales() -> Dict[str, str]:
    """Return supported locale codes mapped to their display names."""
    return {code: _LOCALE_NAMES.get(code, code) for code in TRANSLATIONS}
