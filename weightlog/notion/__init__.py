"""Notion-backed storage for weight samples and profiles."""
