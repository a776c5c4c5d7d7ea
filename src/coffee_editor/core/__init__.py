"""Core domain package for the coffee editor.

Core holds the edited record, field binding, and save orchestration without
any Textual or storage-specific code, keeping the editing logic portable.
"""
