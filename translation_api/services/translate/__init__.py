"""Translate pipeline: validation, prompt building, reply parsing, orchestration.

Use explicit imports:
    from translation_api.services.translate.service import TranslateService
"""
