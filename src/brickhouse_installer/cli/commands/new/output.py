"""Welcome and success output for the new command."""

from rich.panel import Panel
from rich.text import Text

DOCUMENTATION_URL = "https://brickhouse-php.github.io/getting-started/introduction/"


def format_welcome() -> Text:
    text = Text()
    text.append(" Brickhouse ", style="bold white on dark_orange3")
    text.append("  Hello, world!")
    return text


def format_success_banner(directory: str) -> Panel:
    """Format the closing panel with next steps.

    Args:
        directory: The project directory that was created

    Returns:
        Rich Panel ready to print
    """
    lines = [
        Text(
            "🔥 Application created successfully. "
            "You can start your development server with:"
        ),
        Text.assemble(("    ➜ ", "dim"), (f"cd ./{directory}", "bold")),
        Text.assemble(("    ➜ ", "dim"), ("php brickhouse serve", "bold")),
        Text(""),
        Text.assemble(
            "Want to see more? You can learn more from our ",
            ("documentation", f"link {DOCUMENTATION_URL}"),
            f" ({DOCUMENTATION_URL}).",
        ),
        Text("We're happy to have you!", style="bold"),
    ]
    return Panel(Text("\n").join(lines), border_style="green", padding=(1, 2))
