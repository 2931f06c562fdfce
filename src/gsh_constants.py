SHELL_NAME = "green-shell"

HISTORY_FILENAME = ".gsh_history"

# alias name -> expansion
DEFAULT_ALIASES = {
    "lg": "lazygit",
    "gs": "git status -s -b",
}

HELP_TEXT = """\
{name} - a small interactive shell

Type a program name and its arguments, then press Enter.
One command per line; no pipes, redirection or background jobs."""
