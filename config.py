import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BOT_KEY = os.getenv("BOT_KEY")
PROMPTS_PATH = os.getenv("PROMPTS_PATH", str(Path(__file__).parent / "data" / "prompts.txt"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
MIN_PLAYERS = 2
MAX_PLAYERS = 10
