# lingosync\core\domain\messages.py
"""User-facing texts passed through the callback boundary."""

LOGIN_SUCCESSFUL = "Login successful."
LOGIN_FIRST = "Please log in first."
LOGIN_WRONG_CREDENTIALS = "Wrong email or password. Please try again."
CREATE_ACCOUNT_EXISTING = "An account with this email already exists."
NO_INTERNET_CONNECTION = "No internet connection."
SAME_LANGUAGE = "Source and target language must be different."
LANGUAGE_COMBINATION_INVALID = "This language combination is not supported."
LANGUAGE_SERVER_ERROR = "The server could not be reached. Please try again later."
BOOKMARK_DELETED = "Word deleted."
BOOKMARK_DELETE_FAILED = "The word could not be deleted."
LOGGED_OUT = "Logged out."

def bookmark_saved(word: str, translation: str) -> str:
    return f"{word} = {translation} saved"
