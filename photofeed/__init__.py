"""Photofeed API service."""
