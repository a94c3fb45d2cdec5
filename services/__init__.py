"""
services/ - Business Logic Layer
=================================
Services validate command arguments, call the repositories and build
the reply text. They know nothing about Telegram.
"""
