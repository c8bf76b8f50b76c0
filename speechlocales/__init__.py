"""Speech locale tables.

This package queries the speech service metadata endpoints and renders
the Markdown reference tables for speech to text locales, language
identification, text to speech voices and voice styles/roles.
"""
