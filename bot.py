import logging
from telegram import Update
from telegram.ext import ApplicationBuilder, CallbackQueryHandler, CommandHandler, ContextTypes, MessageHandler, filters

from core.telegram_client import TelegramClient
from core.game_manager import GameManager
from core.player_manager import PlayerManager
from core.prompt_manager import load_prompts
from models.Game import ViewType
from utils.helpers import HOME_TEXT, format_card, format_roster, gameplay_markup, home_markup, setup_markup
from config import BOT_KEY, LOG_LEVEL, MAX_PLAYERS, PROMPTS_PATH

logger = logging.getLogger(__name__)

# --- Managers ---
game_manager = GameManager(load_prompts(PROMPTS_PATH))

# new plain-text messages only; edits would add a second name
NAME_FILTER = filters.TEXT & ~filters.COMMAND & ~filters.UpdateType.EDITED


def client_for(context: ContextTypes.DEFAULT_TYPE) -> TelegramClient:
    return TelegramClient(context.bot)


# -------------------------
# COMMAND HANDLERS
# -------------------------
async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    game_manager.go_home(chat_id)
    await client_for(context).send_message(chat_id, HOME_TEXT, reply_markup=home_markup())

async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await client_for(context).send_message(
        update.effective_chat.id,
        "/start - open Cheers\n"
        "/add <name> - add a mate during setup\n"
        "/remove <name> - remove a mate during setup\n"
        "/end - end the current game"
    )

async def add_player(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await _add_name(update, context, " ".join(context.args or []))

async def remove_player(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    client = client_for(context)

    game = game_manager.get_game(chat_id)
    if not game or game.view != ViewType.PLAYER_SETUP:
        await client.send_message(chat_id, "Mates can only be changed during setup. Use /start first.")
        return

    name = " ".join(context.args or [])
    if not PlayerManager.remove_player(game, name):
        await client.send_message(chat_id, f"No mate called {name or '...'} here.")
        return

    await _send_roster(client, game)

async def handle_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    game = game_manager.get_game(update.effective_chat.id)
    if not game or game.view != ViewType.PLAYER_SETUP:
        # only setup listens to plain chat
        return
    if update.message is None:
        # edited messages and channel posts never add names
        return
    await _add_name(update, context, update.message.text)

async def end_game(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id
    client = client_for(context)

    if not game_manager.stop_game(chat_id):
        await client.send_message(chat_id, "No active game to end")
        return

    await client.send_message(chat_id, "🛑 The game has been ended. Use /start to play again.")

async def _add_name(update: Update, context: ContextTypes.DEFAULT_TYPE, raw_name):
    chat_id = update.effective_chat.id
    client = client_for(context)

    game = game_manager.get_game(chat_id)
    if not game or game.view != ViewType.PLAYER_SETUP:
        await client.send_message(chat_id, "Mates can only be added during setup. Use /start first.")
        return

    if PlayerManager.is_full(game):
        await client.send_message(chat_id, f"That's a full table! {MAX_PLAYERS} mates max.")
        return

    if PlayerManager.add_player(game, raw_name) is None:
        await client.send_message(chat_id, "That name is empty or already taken.")
        return

    await _send_roster(client, game)

async def _send_roster(client: TelegramClient, game):
    await client.send_message(
        game.chat_id,
        format_roster(game.player_names),
        reply_markup=setup_markup(PlayerManager.can_start(game))
    )

# -------------------------
# BUTTON HANDLERS
# -------------------------
async def open_setup(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()

    chat_id = update.effective_chat.id
    game = game_manager.open_setup(chat_id)
    if not game:
        await client_for(context).send_message(chat_id, "A game is already running. Tap Home to leave it first.")
        return

    await client_for(context).edit_message(
        chat_id,
        query.message.message_id,
        format_roster(game.player_names),
        reply_markup=setup_markup(PlayerManager.can_start(game))
    )

async def play(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()

    chat_id = update.effective_chat.id
    game = game_manager.get_game(chat_id)
    if game and game.view == ViewType.GAMEPLAY:
        await client_for(context).send_message(chat_id, "A game is already running. Tap Home to leave it first.")
        return

    game = game_manager.start_gameplay(chat_id)
    if not game:
        await client_for(context).send_message(chat_id, "Need at least two mates to start.")
        return

    await client_for(context).send_message(
        chat_id,
        format_card(game.current_player, game.current_prompt),
        reply_markup=gameplay_markup(game.is_finished)
    )

async def next_mate(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()

    chat_id = update.effective_chat.id
    game = game_manager.next_mate(chat_id)
    if not game:
        await client_for(context).send_message(chat_id, "No game running. Use /start to begin.")
        return

    await client_for(context).edit_message(
        chat_id,
        query.message.message_id,
        format_card(game.current_player, game.current_prompt),
        reply_markup=gameplay_markup(game.is_finished)
    )

async def go_home(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()

    chat_id = update.effective_chat.id
    game_manager.go_home(chat_id)
    await client_for(context).edit_message(chat_id, query.message.message_id, HOME_TEXT, reply_markup=home_markup())

# -------------------------
# ERRORS
# -------------------------
async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    logger.error("Exception while handling an update", exc_info=context.error)

# -------------------------
# MAIN
# -------------------------
def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not BOT_KEY:
        raise RuntimeError("BOT_KEY is not set (add it to .env)")

    app = ApplicationBuilder().token(BOT_KEY).build()

    # Commands
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("add", add_player))
    app.add_handler(CommandHandler("remove", remove_player))
    app.add_handler(CommandHandler("end", end_game))

    # Buttons
    app.add_handler(CallbackQueryHandler(open_setup, pattern="^nav_setup$"))
    app.add_handler(CallbackQueryHandler(go_home, pattern="^nav_home$"))
    app.add_handler(CallbackQueryHandler(play, pattern="^play$"))
    app.add_handler(CallbackQueryHandler(next_mate, pattern="^next_mate$"))

    # Player names during setup
    app.add_handler(MessageHandler(NAME_FILTER, handle_text))

    app.add_error_handler(error_handler)

    logger.info("Cheers bot is running...")
    app.run_polling()


if __name__ == "__main__":
    main()
