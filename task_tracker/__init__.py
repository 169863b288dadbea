"""
Single-user task tracker: JSON file storage behind a small REST API.
"""
