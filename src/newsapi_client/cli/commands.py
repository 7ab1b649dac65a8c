"""Resolution of the first CLI token to a command."""

from enum import StrEnum

from newsapi_client.errors import ValidationError


class Command(StrEnum):
    """Top-level CLI commands."""

    HEADLINES = "headlines"
    SOURCES = "sources"
    EVERYTHING = "everything"
    HELP = "help"
    VERSION = "version"
    UNKNOWN = "unknown"


HELP_TOKENS = frozenset({"--help", "-h", "help"})
VERSION_TOKENS = frozenset({"--version", "-v", "version"})

# Commands reachable by prefix, in matching order.
API_COMMANDS = (Command.HEADLINES, Command.SOURCES, Command.EVERYTHING)


def resolve_command(token: str) -> Command:
    """Map a user token to a command.

    Help and version tokens match exactly; any other token matches the API
    command it is a prefix of (``h``, ``sou``, ``EVERY``). Matching ignores
    case. An empty token means help.

    Raises:
        ValidationError: If the token is a prefix of more than one command.
    """
    cmd = token.lower()
    if not cmd or cmd in HELP_TOKENS:
        return Command.HELP
    if cmd in VERSION_TOKENS:
        return Command.VERSION

    matches = [command for command in API_COMMANDS if command.value.startswith(cmd)]
    if len(matches) > 1:
        names = ", ".join(command.value for command in matches)
        msg = f"Ambiguous command: {token} (matches {names})"
        raise ValidationError(msg)
    if matches:
        return matches[0]
    return Command.UNKNOWN
