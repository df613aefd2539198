"""Taskboard: task list manager API."""
