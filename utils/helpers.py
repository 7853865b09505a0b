from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from config import MAX_PLAYERS, MIN_PLAYERS

HOME_TEXT = "🍻 Cheers!\n\nThe drinking game for you and your mates."


def clean_name(raw):
    # trim and collapse inner whitespace
    return " ".join((raw or "").split())


def format_roster(names):
    lines = ["🍻 Mates", ""]
    if names:
        lines += [f"{idx + 1}. {name}" for idx, name in enumerate(names)]
    else:
        lines.append("No mates yet.")
    lines.append("")
    lines.append(
        f"Send each mate's name as a message ({MIN_PLAYERS}-{MAX_PLAYERS} mates). "
        "Use /add <name> to add one (needed in groups where the bot's privacy mode is on) "
        "and /remove <name> to drop one."
    )
    return "\n".join(lines)


def format_card(player, prompt):
    return f"🍺 {player.name}\n\n{prompt}"


def home_markup():
    return InlineKeyboardMarkup([[InlineKeyboardButton("Start", callback_data="nav_setup")]])


def setup_markup(can_play):
    row = [InlineKeyboardButton("🏠 Home", callback_data="nav_home")]
    if can_play:
        row.append(InlineKeyboardButton("Play", callback_data="play"))
    return InlineKeyboardMarkup([row])


def gameplay_markup(finished=False):
    row = [InlineKeyboardButton("🏠 Home", callback_data="nav_home")]
    if not finished:
        row.append(InlineKeyboardButton("Next Mate", callback_data="next_mate"))
    return InlineKeyboardMarkup([row])
