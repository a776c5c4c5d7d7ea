"""Coffee editor: form state, save orchestration, and a Textual editing screen."""
