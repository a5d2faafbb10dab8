"""
Process-wide collaborators handed to route handlers via FastAPI Depends.
Tests swap them with app.dependency_overrides.
"""
from auth import AdminDirectory
from chatbot import TeamChatbot
from llm import create_chat_provider
from storage import MessageRepository, create_message_store

# Global instances, created once at import
message_store = create_message_store()
admin_directory = AdminDirectory.from_config()
bot = TeamChatbot(create_chat_provider())


def get_message_store() -> MessageRepository:
    return message_store


def get_admin_directory() -> AdminDirectory:
    return admin_directory


def get_chatbot() -> TeamChatbot:
    return bot
