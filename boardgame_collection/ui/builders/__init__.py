"""Builders that assemble the main window's toolbar, filter panel and status bar."""
