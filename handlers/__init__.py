"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler parses the command text, delegates to
the LessonService stored in ``bot_data``, and sends the reply back to the chat.
No business logic lives here.
"""
