"""TaskAI daily assistant: chat, file summaries, notes and task planning on Gemini."""

__version__ = "1.0.0"
