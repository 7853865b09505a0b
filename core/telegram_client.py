from telegram import Bot


class TelegramClient:
    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_message(self, chat_id, text, **kwargs):
        return await self.bot.send_message(chat_id=chat_id, text=text, **kwargs)

    async def edit_message(self, chat_id, message_id, text, **kwargs):
        """Replace the text (and optionally the keyboard) of a message the bot already sent."""
        return await self.bot.edit_message_text(chat_id=chat_id, message_id=message_id, text=text, **kwargs)
