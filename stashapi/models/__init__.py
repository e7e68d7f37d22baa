"""Data models for API replies (get) and request payloads (post)."""