"""
Application-wide constants.

Thresholds, display budgets and the fixed texts sent to chat users.
"""

# Random pick filter (compared as strings against stored values)
DEFAULT_MIN_RATING = "7"
DEFAULT_MIN_YEAR = "2000"
RANDOM_SAMPLE_SIZE = 1

# Presentation
SUMMARY_MAX_LENGTH = 270
SUMMARY_ELLIPSIS = "..."
GENRE_SEPARATOR = ", "

# Store
DEFAULT_DATABASE_NAME = "moviemagnet"
DEFAULT_COLLECTION_NAME = "movies"
GENRES_FIELD = "genres"

# Process
INSTANCE_LOCK_FILENAME = "moviemagnet_bot.lock"

# Commands
CMD_START = "start"
CMD_ABOUT = "about"
CMD_HELP = "help"
CMD_RANDOM_MOVIE = "randommovie"
CMD_DISPLAY_GENRES = "displaygenres"
CMD_GENRE = "genre"

# User-visible texts
UNKNOWN_USERNAME = "there"
START_MESSAGE_TEMPLATE = "Hello {username}, How may I help you today?"

ABOUT_MESSAGE = (
    "🎬 Welcome to MovieMagnet! 🤖\n\n"
    "Discover the latest blockbusters effortlessly. 🌟\n"
    "Instantly download your favorite movies in HD. 🎥\n"
    "Stay ahead with our curated selection of the newest releases. 🍿\n"
    "Experience cinema at your fingertips with MovieMagnet! 🌟🤖"
)

HELP_MESSAGE = (
    "\n🤖 *MovieMagnet Bot Help* 🤖\n\n\n"
    "Use the following *commands* to interact with the bot:\n\n"
    "/help - Display available commands and their descriptions.\n"
    "/about - Learn more about MovieMagnet bot.\n"
    "/randommovie - Get a random movie recommendation.\n"
    "/displaygenres - Display all available genres.\n"
    "/genre (Movie genre Choice) - Display Random Movie With Specified Genre "
    "(example : /genre crime) \n"
)

GENRES_HEADER = "🎭 *Available Genres* 🎭"
NO_GENRE_MATCH_MESSAGE = "No movie found for the specified genre."
GENERIC_ERROR_MESSAGE = "An error occurred while processing your request"
