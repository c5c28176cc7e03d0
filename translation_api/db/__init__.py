"""Database engine, sessions and the translation store.

Imports are intentionally NOT eagerly loaded here so importing the package
does not create the engine. Use explicit imports:
    from translation_api.db.postgres import async_session_factory
    from translation_api.db.translation_store import SqlTranslationStore
"""
