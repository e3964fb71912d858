"""Helper utilities (i18n, resource paths, enum labels)."""
