# chat/notices.py
#
# User-facing texts emitted into the conversation log.

NAMES_SEPARATOR = ", "

GREETING = (
    "Hello! I'm your AI investment assistant. "
    "How can I help you get started with investing today?"
)

CONTEXT_CLEARED = "The document context has been removed from storage."

UNKNOWN_ERROR = "An unknown error occurred."

AUTH_MISMATCH = "Incorrect email. Please try again."


def join_names(names):
    return NAMES_SEPARATOR.join(names)


def context_restored(names):
    return f"Using context from saved documents: {join_names(names)}."


def context_uploaded(names):
    return (
        f'The documents "{join_names(names)}" have been uploaded and saved. '
        "Their content will be used as context for your questions."
    )


def turn_failed_reply(description):
    return f"Sorry, I ran into an error: {description}"


def turn_failed_banner(description):
    return f"Could not get a response: {description}"
